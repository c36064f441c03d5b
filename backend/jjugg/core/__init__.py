from jjugg.core.config import Settings, get_settings, settings
from jjugg.core.logging import ExtractionLogger, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "ExtractionLogger",
    "get_logger",
]
