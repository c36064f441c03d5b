"""Coleccion de routers de la API."""

from jjugg.api.routes.stack import router as stack_router

__all__ = ["stack_router"]
