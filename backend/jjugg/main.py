from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jjugg.api import router
from jjugg.core import get_logger, settings
from jjugg.schemas import HealthResponse, ProviderHealthResponse
from jjugg.services import check_groq_health

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Iniciando jjugg API [{settings.app_env}]")
    if not settings.ai_configured:
        logger.warning("GROQ_API_KEY no configurada: /api/infer-tech-stack respondera 503")
    yield
    logger.info("Cerrando jjugg API")


app = FastAPI(
    title="jjugg Tech Stack API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["POST"],
    allow_headers=["*"],
)


# Exception handler global
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Routes
app.include_router(router, prefix="/api", tags=["Stack"])


@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", env=settings.app_env, ai_configured=settings.ai_configured)


@app.get("/health/provider", response_model=ProviderHealthResponse)
async def provider_health_check():
    """Verifica que Groq responde; sin API key no hace llamada de red."""
    return ProviderHealthResponse(provider="groq", reachable=await check_groq_health())


def run() -> None:
    """Entry point de `jjugg-api`: sirve la app con uvicorn."""
    uvicorn.run(
        "jjugg.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        log_config=None,
    )
