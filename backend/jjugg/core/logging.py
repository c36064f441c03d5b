import logging
import sys
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Directorio de logs (backend/logs/)
_LOG_DIR = Path(__file__).parent.parent.parent / "logs"

_PREVIEW_CHARS = 100

# Símbolos para visualizar el flujo
FLOW_SYMBOLS = {
    "start": "╔",
    "node": "║",
    "arrow": "→",
    "end": "╚",
    "fail": "✖",
}


def _configure_root_logger(level: LogLevel) -> None:
    """Configura el logger raíz con handlers de consola y archivo."""
    root = logging.getLogger()
    if root.handlers:
        return

    # Silenciar loggers ruidosos de terceros
    noisy_loggers = [
        "watchfiles",
        "watchfiles.main",
        "httpx",
        "httpcore",
        "httpcore.http11",
        "httpcore.connection",
        "groq",
        "groq._base_client",
        "urllib3",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    # Handler de consola (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Handler de archivo con rotación diaria (mantiene 7 días)
    try:
        _LOG_DIR.mkdir(exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            _LOG_DIR / "jjugg_api.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    except OSError as e:
        # Si falla la creación del archivo, solo usar consola
        root.warning(f"File logging disabled: {e}")

    root.setLevel(level)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Retorna un logger configurado para el módulo especificado.

    Uso:
        from jjugg.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Mensaje")
    """
    from jjugg.core.config import settings

    _configure_root_logger(settings.log_level)
    return logging.getLogger(name)


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    return f"{flat[:_PREVIEW_CHARS]}{'...' if len(flat) > _PREVIEW_CHARS else ''}"


class ExtractionLogger:
    """Logger especializado para trazabilidad de la extracción de stack."""

    def __init__(self, component: str):
        self._logger = get_logger(f"stack.{component}")
        self.component = component

    def extraction_start(self, job_description: str) -> None:
        """Log inicio de una extracción."""
        self._logger.info(
            f"{FLOW_SYMBOLS['start']}══ EXTRACTION START | {len(job_description)} chars | "
            f"{_preview(job_description)}"
        )

    def provider_call(self, model: str | None) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [PROVIDER] {FLOW_SYMBOLS['arrow']} Invoking {model or 'llm'}")

    def parse_outcome(self, source: str, raw_count: int) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [PARSE] {FLOW_SYMBOLS['arrow']} source={source} | raw items={raw_count}")

    def extraction_end(self, stack: list[str]) -> None:
        """Log fin de extracción con resumen."""
        self._logger.info(
            f"{FLOW_SYMBOLS['end']}══ EXTRACTION COMPLETE | {len(stack)} technologies: "
            f"{', '.join(stack) if stack else '-'}"
        )

    def extraction_failed(self, code: str, error: Exception | None = None) -> None:
        """Log de fallo terminal. La causa solo queda en el log."""
        server_side = getattr(error, "status_code", 500) >= 500
        if error is not None and server_side and error.__cause__ is not None:
            cause = error.__cause__
            self._logger.error(
                f"{FLOW_SYMBOLS['fail']} [{code}] {type(cause).__name__}: {cause}",
                exc_info=cause,
            )
        else:
            self._logger.warning(f"{FLOW_SYMBOLS['fail']} [{code}] {error or 'rejected'}")
