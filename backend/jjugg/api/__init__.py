from fastapi import APIRouter

from jjugg.api.routes import stack_router

router = APIRouter()
router.include_router(stack_router)

__all__ = ["router"]
