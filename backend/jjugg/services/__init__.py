from jjugg.services.llm_factory import check_groq_health, get_llm
from jjugg.services.stack_extraction import LLMProtocol, StackExtractionService
from jjugg.services.container import DependencyContainer, get_container, reset_container

__all__ = [
    "get_llm",
    "check_groq_health",
    "LLMProtocol",
    "StackExtractionService",
    "DependencyContainer",
    "get_container",
    "reset_container",
]
