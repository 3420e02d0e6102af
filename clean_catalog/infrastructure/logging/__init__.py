"""
Logging Infrastructure

Console and JSON file logging with structlog on top of the stdlib loggers.
"""

from .logging_config import (
    CatalogJsonFormatter,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "CatalogJsonFormatter",
    "get_structured_logger",
    "setup_logging",
]
