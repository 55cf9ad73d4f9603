"""Unified configuration management for the application."""
from __future__ import annotations

import threading
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.config.loader import ConfigurationLoader
from pattern_gallery.config.schemas import AppConfig, LoggingConfig, ObserverConfig, validate_config
from pattern_gallery.domain.core.exceptions import ConfigurationError


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Loads lazily on first access and caches the validated ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        raw = self.loader.load(self._config_file)
        try:
            return validate_config(raw)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields)

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_observer_config(self) -> ObserverConfig:
        """Get observer example configuration."""
        return self.app_config.observer

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config
