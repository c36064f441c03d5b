import httpx
from functools import lru_cache

from langchain_groq import ChatGroq

from jjugg.core.config import settings
from jjugg.core.logging import get_logger

logger = get_logger(__name__)

GROQ_API_URL = "https://api.groq.com/openai/v1"


@lru_cache
def get_llm(
    temperature: float = 0.0,
    max_tokens: int | None = None,
    model: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
) -> ChatGroq:
    """
    Factory singleton para instancias de ChatGroq.

    La extracción de stack es una sola llamada sin reintentos:
    - max_retries: 0 (un fallo es terminal y se reporta como ai_inference_failed)
    - request_timeout: timeout o settings.llm_request_timeout (corta llamadas colgadas)

    model, api_key y timeout sin valor toman los de settings globales.
    Requiere una API key; el llamador verifica ai_configured antes.
    """
    model = model or settings.groq_model
    logger.info(f"Inicializando LLM: {model} (temp={temperature}, max_tokens={max_tokens})")
    return ChatGroq(
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        api_key=api_key or settings.groq_api_key,
        request_timeout=timeout or settings.llm_request_timeout,
        max_retries=0,
    )


async def check_groq_health() -> bool:
    """Verifica conectividad con Groq API."""
    if not settings.ai_configured:
        return False
    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            response = await client.get(
                f"{GROQ_API_URL}/models",
                headers={"Authorization": f"Bearer {settings.groq_api_key}"},
            )
            return response.status_code == 200
    except httpx.HTTPError as e:
        logger.warning(f"Groq health check failed: {type(e).__name__}: {e}")
        return False
