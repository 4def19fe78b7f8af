"""Dependency injection exceptions."""

from typing import Any, Optional, Type


class DependencyResolutionError(Exception):
    """Raised when a dependency cannot be resolved."""

    def __init__(
        self,
        dependency_type: Type,
        message: str,
        parent_type: Optional[Type] = None,
        cause: Optional[BaseException] = None,
    ):
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.cause = cause
        name = getattr(dependency_type, "__name__", str(dependency_type))
        if parent_type is not None:
            message = f"{message} (required by {parent_type.__name__})"
        super().__init__(f"Cannot resolve {name}: {message}")


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type was never registered with the container."""

    def __init__(self, dependency_type: Type, parent_type: Optional[Type] = None):
        super().__init__(dependency_type, "no registration found", parent_type)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""

    def __init__(self, dependency_type: Type, message: str, cause: Any = None):
        super().__init__(dependency_type, message, cause=cause)
