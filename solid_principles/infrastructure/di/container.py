"""
Dependency Injection Container implementation.

Orchestrators never build their own collaborators. The container is the one
place where concrete variants are chosen and handed to the types that need
them.
"""

from typing import Any, Callable, Dict, Optional, Type, TypeVar, cast

from solid_principles.domain.base.exceptions import DomainException
from solid_principles.infrastructure.di.exceptions import (
    DependencyResolutionError,
    FactoryError,
    UnregisteredDependencyError,
)
from solid_principles.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class DIContainer:
    """
    Minimal dependency injection container.

    Features:
    - Pre-created instances
    - Lazily created singletons (class or factory)
    - Factories producing a fresh instance on every lookup
    """

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._singleton_factories: Dict[Type, Callable[["DIContainer"], Any]] = {}
        self._factories: Dict[Type, Callable[["DIContainer"], Any]] = {}
        self._instances: Dict[Type, Any] = {}

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._instances
            or cls in self._singletons
            or cls in self._singleton_factories
            or cls in self._factories
        )

    def has(self, service_type: Type[T]) -> bool:
        """Check if service is registered in container."""
        return self.is_registered(service_type)

    def register_singleton(
        self, cls: Type[T], factory: Optional[Callable[["DIContainer"], T]] = None
    ) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            factory: Optional factory receiving the container. Without one the
                     class is instantiated with no arguments on first lookup.
        """
        self._singletons.pop(cls, None)
        self._singleton_factories[cls] = factory if factory is not None else (lambda _: cls())
        logger.debug(f"Registered singleton for {cls.__name__}")

    def register_factory(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function to create instances
        """
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {cls.__name__}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def get(self, cls: Type[T], parent_type: Optional[Type] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get
            parent_type: Optional type that requires this dependency, for error messages

        Returns:
            Instance of the requested type

        Raises:
            UnregisteredDependencyError: If the type was never registered
            FactoryError: If a registered factory fails
        """
        if cls in self._instances:
            return cast(T, self._instances[cls])

        if cls in self._singletons:
            return cast(T, self._singletons[cls])

        if cls in self._singleton_factories:
            instance = self._call_factory(cls, self._singleton_factories[cls])
            self._singletons[cls] = instance
            logger.debug(f"Singleton instance created for {cls.__name__}")
            return cast(T, instance)

        if cls in self._factories:
            return cast(T, self._call_factory(cls, self._factories[cls]))

        raise UnregisteredDependencyError(cls, parent_type)

    def _call_factory(self, cls: Type, factory: Callable[["DIContainer"], Any]) -> Any:
        try:
            return factory(self)
        except (DependencyResolutionError, DomainException):
            raise
        except Exception as e:
            logger.error(f"Factory failed to create instance of {cls.__name__}: {str(e)}")
            raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

    def clear(self) -> None:
        """Drop every registration."""
        self._singletons.clear()
        self._singleton_factories.clear()
        self._factories.clear()
        self._instances.clear()
