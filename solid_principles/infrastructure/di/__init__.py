"""Dependency injection infrastructure."""

from .container import DIContainer
from .exceptions import DependencyResolutionError, FactoryError, UnregisteredDependencyError
from .services import register_all_services

__all__ = [
    "DIContainer",
    "DependencyResolutionError",
    "FactoryError",
    "UnregisteredDependencyError",
    "register_all_services",
]
