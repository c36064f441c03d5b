from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración centralizada del backend con validación de tipos."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
    )
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)

    # Groq (opcional: sin key el endpoint responde 503, nunca usa heurísticas)
    groq_api_key: Optional[str] = Field(default=None)
    groq_model: str = Field(
        default="llama-3.1-8b-instant",
        validation_alias=AliasChoices("ai_model", "groq_model"),
    )
    llm_request_timeout: float = Field(default=30.0, gt=0.0, le=300.0)

    # Extracción de stack
    stack_temperature: float = Field(default=0.1, ge=0.0, le=1.0)
    stack_max_tokens: int = Field(default=300, ge=16, le=4096)
    stack_max_items: int = Field(default=20, ge=1, le=200)
    stack_max_name_length: int = Field(default=64, ge=1, le=1000)

    @property
    def ai_configured(self) -> bool:
        return bool(self.groq_api_key and self.groq_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Singleton cacheado para evitar recargar .env en cada request."""
    return Settings()


settings = get_settings()
