"""SOLID Principles Examples - Root Package.

This package collects five independent examples, one per SOLID design
principle, each built around capability abstractions and the variants that
implement them.

Key Components:
    - domain: Capabilities, variants and orchestrators for each principle
    - config: Configuration schemas and loading
    - infrastructure: Logging, dependency injection and type registries
    - cli: Command line entry point

Examples:
    - notification: Dependency Inversion
    - printer: Interface Segregation
    - shape: Liskov Substitution
    - payment: Open/Closed
    - order: Single Responsibility
"""

from ._version import __version__

__package_name__ = "solid-principles-examples"

__all__ = ["__version__"]
