from jjugg.schemas.requests import ExtractionRequest
from jjugg.schemas.responses import ExtractionResult, HealthResponse, ProviderHealthResponse

__all__ = [
    "ExtractionRequest",
    "ExtractionResult",
    "HealthResponse",
    "ProviderHealthResponse",
]
