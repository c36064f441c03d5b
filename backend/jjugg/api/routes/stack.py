"""Endpoint de inferencia de stack tecnológico a partir de una oferta."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from jjugg.core.exceptions import status_for_code
from jjugg.core.logging import get_logger
from jjugg.schemas import ExtractionResult
from jjugg.services.container import get_container
from jjugg.services.stack_extraction import StackExtractionService

logger = get_logger(__name__)
router = APIRouter()


def get_stack_service() -> StackExtractionService:
    """Dependencia sobreescribible en tests."""
    return get_container().stack_service


async def _read_job_description(request: Request) -> Any:
    """Devuelve `jobDescription` del body JSON, o None si el body no sirve."""
    try:
        body = await request.json()
    except ValueError:
        logger.debug("[STACK] Body no es JSON válido")
        return None
    if not isinstance(body, dict):
        return None
    return body.get("jobDescription")


@router.post(
    "/infer-tech-stack",
    response_model=ExtractionResult,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={400: {"model": ExtractionResult}, 503: {"model": ExtractionResult}},
)
async def infer_tech_stack(
    request: Request,
    service: StackExtractionService = Depends(get_stack_service),
) -> JSONResponse:
    """Extrae el stack de `jobDescription` usando el LLM. Solo acepta POST."""
    job_description = await _read_job_description(request)
    result = await service.extract(job_description)
    return JSONResponse(
        status_code=status_for_code(result.error),
        content=result.to_payload(),
    )
