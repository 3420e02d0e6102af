"""
Logging configuration for the catalog

Console output for humans, optional rotating JSON files for machines, and
structlog rendering through the same stdlib handlers.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import structlog
from pythonjsonlogger import jsonlogger

from clean_catalog.infrastructure.configuration.config import Settings, get_config

LOG_FILE_NAME = "clean_catalog.log"
ERROR_LOG_FILE_NAME = "errors.log"


class CatalogJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with catalog-specific fields"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["process_id"] = os.getpid()

        if hasattr(record, "category_id"):
            log_record["category_id"] = record.category_id

        if hasattr(record, "error_code"):
            log_record["error_code"] = record.error_code


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Configure the root logger

    Args:
        settings: Settings to apply, defaults to the global settings

    Returns:
        The package logger
    """
    settings = settings or get_config()
    level = getattr(logging, settings.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        app_handler = logging.handlers.RotatingFileHandler(
            logs_dir / LOG_FILE_NAME,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        app_handler.setLevel(level)
        app_handler.setFormatter(CatalogJsonFormatter())
        root_logger.addHandler(app_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            logs_dir / ERROR_LOG_FILE_NAME,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(CatalogJsonFormatter())
        root_logger.addHandler(error_handler)

    _configure_structlog()

    logger = logging.getLogger("clean_catalog")
    logger.info(
        "Logging configured",
        extra={"environment": settings.environment, "log_level": settings.log_level},
    )
    return logger


def _configure_structlog():
    """Configure structlog to hand events to the stdlib handlers"""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
