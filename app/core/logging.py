"""TableBot structured logging module.

Everything logs through structlog on top of the standard library, so
discord.py and uvicorn records end up in the same stream as ours. Under
pytest the root level sits above CRITICAL and nothing is emitted.
"""

import logging
import inspect
import sys
from typing import Any, List

import structlog
from structlog.stdlib import BoundLogger
from .config import settings

SILENT = logging.CRITICAL + 1

# Libraries that are chatty at INFO
QUIET_LOGGERS = {
    "discord": logging.WARNING,
    "discord.gateway": logging.WARNING,
    "urllib3": logging.WARNING,
}


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _processors(production: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _resolve_level(log_level: str | None) -> int:
    if _is_test_environment():
        return SILENT
    name = (log_level or settings.LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(log_level: str | None = None) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Level name overriding ``settings.LOG_LEVEL``

    Returns:
        The root structlog logger
    """
    level = _resolve_level(log_level)

    structlog.configure(
        processors=_processors(settings.is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    if level != SILENT:
        for name, quiet_level in QUIET_LOGGERS.items():
            logging.getLogger(name).setLevel(max(level, quiet_level))

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context."""
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
