"""Structured logging setup."""

from pattern_gallery.infrastructure.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
