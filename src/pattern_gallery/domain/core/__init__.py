"""Core domain primitives."""

from pattern_gallery.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    ExampleNotFoundError,
    OperatorNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "ExampleNotFoundError",
    "OperatorNotFoundError",
]
