"""Base domain layer - shared kernel for all examples."""

from .exceptions import ConfigurationError, DomainException, UnsupportedTypeError

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnsupportedTypeError",
]
