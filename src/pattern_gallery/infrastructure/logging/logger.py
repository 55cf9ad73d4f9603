import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

import structlog

from pattern_gallery._package import ENV_PREFIX, PACKAGE_NAME

_configured = False


class DetailedFormatter(logging.Formatter):
    """Formatter that adds ``module.function:line`` caller information."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(logging_config: Optional[Any] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        logging_config: ``LoggingConfig`` instance. If None, the defaults are
            used with the level taken from ``PATTERN_GALLERY_LOG_LEVEL``.
    Returns:
        Configured structlog logger instance.
    """
    global _configured

    if logging_config is None:
        from pattern_gallery.config.schemas.logging_schema import LoggingConfig

        logging_config = LoggingConfig(
            level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING")
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config.level.upper()))

    formatter = DetailedFormatter(logging_config.format)
    handlers = []

    if logging_config.destination in ("file", "both"):
        log_path = os.path.expandvars(logging_config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=logging_config.max_size_mb * 1024 * 1024,
            backupCount=logging_config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Example output owns stdout; console logging defaults to stderr
    if logging_config.destination in ("stderr", "both"):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)
    elif logging_config.destination == "stdout":
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

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
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    _configured = True

    logger = structlog.get_logger(PACKAGE_NAME)
    logger.debug(
        "Logging configured",
        log_level=logging_config.level,
        log_destination=logging_config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, configuring defaults on first use."""
    if not _configured:
        setup_logging()
    return structlog.get_logger(name)
