"""
Dependency Injection Container.

This module provides a centralized container for the services behind the
API. It builds the chat model lazily (only when an API key is configured)
and hands it to the StackExtractionService.

The container pattern enables:
- Centralized dependency management
- Easy testing with mock dependencies
- Lazy initialization of the LLM client

Example:
    from jjugg.services.container import get_container

    service = get_container().stack_service
    result = await service.extract(job_description)
"""

from functools import lru_cache
from typing import Optional

from jjugg.core.config import Settings, get_settings
from jjugg.services.llm_factory import get_llm
from jjugg.services.stack_extraction import LLMProtocol, StackExtractionService
from jjugg_skills.tech_stack_normalizer import NormalizerLimits

_UNSET = object()


class DependencyContainer:
    """
    Centralized container for application dependencies.

    Attributes:
        _settings: Settings used to build services.
        _llm: Cached LLM instance, None when no provider is configured.
        _stack_service: Cached StackExtractionService.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the container with lazy service references."""
        self._settings = settings or get_settings()
        self._llm = _UNSET
        self._stack_service: Optional[StackExtractionService] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def llm(self) -> Optional[LLMProtocol]:
        """
        Get the LLM instance.

        Returns:
            ChatGroq bound to the extraction temperature and token limit,
            or None when GROQ_API_KEY is not set.
        """
        if self._llm is _UNSET:
            if self._settings.ai_configured:
                self._llm = get_llm(
                    temperature=self._settings.stack_temperature,
                    max_tokens=self._settings.stack_max_tokens,
                    model=self._settings.groq_model,
                    api_key=self._settings.groq_api_key,
                    timeout=self._settings.llm_request_timeout,
                )
            else:
                self._llm = None
        return self._llm

    @property
    def stack_service(self) -> StackExtractionService:
        """Get the StackExtractionService wired to the container's LLM."""
        if self._stack_service is None:
            self._stack_service = StackExtractionService(
                llm=self.llm,
                model_name=self._settings.groq_model,
                limits=NormalizerLimits(
                    max_items=self._settings.stack_max_items,
                    max_name_length=self._settings.stack_max_name_length,
                ),
            )
        return self._stack_service

    def reset(self) -> None:
        """
        Reset all cached services.

        Useful for testing to ensure fresh instances.
        """
        self._llm = _UNSET
        self._stack_service = None

    def override_llm(self, mock_llm: Optional[LLMProtocol]) -> None:
        """
        Override the LLM with a mock (or None to simulate a missing key).

        Args:
            mock_llm: Mock LLM implementation for testing.
        """
        self._llm = mock_llm
        # Reset service to pick up new LLM
        self._stack_service = None


@lru_cache(maxsize=1)
def get_container() -> DependencyContainer:
    """
    Get the singleton DependencyContainer instance.

    Uses lru_cache to ensure only one container exists per process.
    """
    return DependencyContainer()


def reset_container() -> None:
    """
    Reset the global container singleton.

    Clears the lru_cache and allows a fresh container to be created.
    Useful for testing isolation.
    """
    get_container.cache_clear()
