from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExtractionResult(BaseModel):
    """Resultado de la extracción de stack, tal como viaja al dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    stack: list[str] = Field(default_factory=list, description="Tecnologías canónicas en orden de aparición")
    ai_used: bool = Field(alias="aiUsed", description="True si el proveedor respondió")
    error: str | None = Field(default=None, description="Código fijo de error, si hubo")

    @classmethod
    def success(cls, stack: list[str]) -> "ExtractionResult":
        return cls(stack=stack, ai_used=True)

    @classmethod
    def failure(cls, code: str) -> "ExtractionResult":
        return cls(stack=[], ai_used=False, error=code)

    def to_payload(self) -> dict[str, Any]:
        """Serializa con nombres camelCase y sin `error` en los éxitos."""
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    status: str
    env: str
    ai_configured: bool


class ProviderHealthResponse(BaseModel):
    provider: str
    reachable: bool
