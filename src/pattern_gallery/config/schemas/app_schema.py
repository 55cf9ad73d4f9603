"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .observer_schema import ObserverConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    observer: ObserverConfig = Field(default_factory=lambda: ObserverConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
