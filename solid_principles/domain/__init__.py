"""
Domain Layer - one package per example

- base/: Shared exceptions
- notification/: Dependency Inversion
- printer/: Interface Segregation
- shape/: Liskov Substitution
- payment/: Open/Closed
- order/: Single Responsibility

Each example contains:
- ports.py: Capability interfaces
- concrete variants implementing those capabilities
- an orchestrator where the example has one

No example imports another.
"""

from .base import ConfigurationError, DomainException, UnsupportedTypeError

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnsupportedTypeError",
]
