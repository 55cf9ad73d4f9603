"""Configuration package with clean public API."""

from .schemas import AppConfig, LoggingConfig, ObserverConfig, validate_config
from .manager import ConfigurationManager
from .loader import ConfigurationLoader

__all__ = [
    'AppConfig',
    'validate_config',
    'LoggingConfig',
    'ObserverConfig',
    'ConfigurationManager',
    'ConfigurationLoader',
]
