# src/pattern_gallery/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExampleNotFoundError(DomainException):
    """Raised when a requested example does not exist."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        available = available or []
        super().__init__(
            f"Unknown example '{name}'. Available: {', '.join(available) or 'none'}"
        )
        self.name = name
        self.available = available


class OperatorNotFoundError(DomainException):
    """Raised when no strategy operator is registered under a name."""
    def __init__(self, name: str):
        super().__init__(f"Operator '{name}' is not registered")
        self.name = name
