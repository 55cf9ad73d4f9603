from typing import Any, List, Optional, Type


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class DependencyResolutionError(InfrastructureError):
    """Raised when the DI container cannot resolve a dependency."""
    def __init__(self, dependency_type: Type, message: str, details: Optional[Any] = None):
        name = getattr(dependency_type, "__name__", str(dependency_type))
        super().__init__(f"Cannot resolve {name}: {message}", details)
        self.dependency_type = dependency_type


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type was never registered with the container."""
    def __init__(self, dependency_type: Type):
        super().__init__(dependency_type, "no registration found")


class CircularDependencyError(DependencyResolutionError):
    """Raised when a factory asks the container for a type already being resolved."""
    def __init__(self, chain: List[Type]):
        names = " -> ".join(getattr(t, "__name__", str(t)) for t in chain)
        super().__init__(chain[-1], f"circular dependency detected: {names}")
        self.chain = chain


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""
    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, details=cause)
        self.cause = cause
