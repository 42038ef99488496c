"""Structlog configuration for localekit.

All localekit events are emitted through stdlib loggers under the
"localekit" hierarchy, so the host application decides where they go. The
level of that hierarchy comes from LOG_LEVEL; whether translator lifecycle
events reach info level is decided per translator by I18N_SHOW_LOGS.

Usage:
    from localekit.logging import get_module_logger

    logger = get_module_logger()
    logger.warning("translation_not_found", identifier="general.Nope")
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from localekit.configuration import settings
from localekit.logging.formatters import add_library_info, truncate_large_values

LIBRARY_LOGGER = "localekit"

# Above CRITICAL: nothing passes filter_by_level
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _resolve_level(log_level: Optional[str]) -> int:
    name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def build_processors(is_production: bool) -> List[Any]:
    """Processor chain for localekit events.

    Events below the "localekit" logger's level are dropped before any
    rendering work happens.

    Args:
        is_production: JSON output if True, console output otherwise.

    Returns:
        The structlog processor list.
    """
    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_library_info(LIBRARY_LOGGER, settings.APP_VERSION),
        truncate_large_values(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> logging.Logger:
    """Configure structlog and the level of the "localekit" logger.

    Under pytest the library logger is silenced regardless of arguments.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        is_production: Defaults to settings.is_production.

    Returns:
        The stdlib "localekit" logger.
    """
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    prod_mode = is_production if is_production is not None else settings.is_production

    if _is_test_environment():
        library_logger.setLevel(SILENT)
    else:
        library_logger.setLevel(_resolve_level(log_level))
        # No-op when the host application already configured logging
        logging.basicConfig(format="%(message)s")

    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return library_logger


configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger named after the calling module.

    The stdlib logger is the caller's module name (e.g.
    "localekit.i18n.translator"), so it inherits the "localekit" level, and
    the last name segment is bound as `component`.

    Returns:
        Bound logger for the calling module.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(LIBRARY_LOGGER).bind(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(module_name).bind(
        component=module_name.split(".")[-1]
    )
