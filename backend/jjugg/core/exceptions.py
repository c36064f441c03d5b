"""
Custom exceptions for the jjugg tech-stack backend.

Every error carries the fixed wire ``code`` returned to clients and the
HTTP ``status_code`` it maps to. The message and details are for logs
only and never reach a response body.

Example:
    try:
        stack = await service._run(job_description)
    except StackServiceError as e:
        logger.warning(f"Extraction rejected: {e}")
        return ExtractionResult.failure(e.code)
"""

from typing import Dict, Optional, Type


class StackServiceError(Exception):
    """
    Base exception class for all stack extraction errors.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    code: str = "internal_error"
    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(StackServiceError):
    """
    Raised when the request lacks a usable job description.

    Caller mistake: raised before any provider call is attempted.
    """

    code = "jobDescription_required"
    status_code = 400

    def __init__(
        self,
        message: str = "jobDescription must be a non-empty string",
        received_type: Optional[str] = None,
    ) -> None:
        self.received_type = received_type
        details = f"received: {received_type}" if received_type else None
        super().__init__(message, details)


class ProviderUnavailableError(StackServiceError):
    """
    Raised when no LLM provider is configured (missing API key).

    There is no heuristic fallback; the absence is reported as-is.
    """

    code = "ai_unavailable_missing_api_key"
    status_code = 503

    def __init__(self, message: str = "LLM provider is not configured") -> None:
        super().__init__(f"[LLM] {message}")


class ProviderCallFailedError(StackServiceError):
    """
    Raised when the LLM call fails at runtime.

    Network errors, auth rejected at call time, timeouts and malformed
    requests all collapse into this one kind.

    Attributes:
        model_name: Name of the LLM model that failed.
    """

    code = "ai_inference_failed"
    status_code = 503

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        self.model_name = model_name

        enhanced_message = f"[LLM] {message}"
        if model_name:
            enhanced_message = f"{enhanced_message} (model: {model_name})"

        super().__init__(enhanced_message, details)


_ERROR_TYPES: tuple[Type[StackServiceError], ...] = (
    InvalidInputError,
    ProviderUnavailableError,
    ProviderCallFailedError,
)

STATUS_BY_CODE: Dict[str, int] = {cls.code: cls.status_code for cls in _ERROR_TYPES}


def status_for_code(code: Optional[str]) -> int:
    """HTTP status for a wire error code (200 when there is no error)."""
    if code is None:
        return 200
    return STATUS_BY_CODE.get(code, StackServiceError.status_code)
