"""Structured logging for localekit.

Public API:
    - configure_logging(): Set the structlog pipeline and the "localekit" level
    - get_module_logger(): Get a logger for the calling module
    - build_processors(): The processor chain used by configure_logging()

Formatters:
    - add_library_info(): Processor stamping library name/version
    - truncate_large_values(): Processor to limit string lengths
"""

from localekit.logging.formatters import add_library_info, truncate_large_values
from localekit.logging.setup import (
    LIBRARY_LOGGER,
    build_processors,
    configure_logging,
    get_module_logger,
)

__all__ = [
    "LIBRARY_LOGGER",
    "build_processors",
    "configure_logging",
    "get_module_logger",
    "add_library_info",
    "truncate_large_values",
]
