"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .observer_schema import ObserverConfig

__all__ = ["AppConfig", "validate_config", "LoggingConfig", "ObserverConfig"]
