"""Base registry mapping variant names to factories.

New variants are made available by registering a factory under a name, so
nothing that looks variants up needs an if/elif chain over type names.
"""

import threading
from typing import Callable, Dict, Generic, List, TypeVar

from solid_principles.domain.base.exceptions import ConfigurationError, UnsupportedTypeError
from solid_principles.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class BaseRegistry(Generic[T]):
    """
    Thread-safe name to factory registry.

    Subclasses set ``kind`` for error messages.
    """

    kind = "variant"

    def __init__(self):
        self._factories: Dict[str, Callable[[], T]] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, type_name: str, factory: Callable[[], T]) -> None:
        """
        Register a variant factory.

        Raises:
            ConfigurationError: If the name is already registered
        """
        with self._registry_lock:
            if type_name in self._factories:
                raise ConfigurationError(f"{self.kind.capitalize()} type '{type_name}' is already registered")
            self._factories[type_name] = factory
        self.logger.debug(f"Registered {self.kind} type: {type_name}")

    def unregister(self, type_name: str) -> bool:
        """Remove a registration. Returns False if the name was unknown."""
        with self._registry_lock:
            return self._factories.pop(type_name, None) is not None

    def create(self, type_name: str) -> T:
        """
        Create the variant registered under type_name.

        Raises:
            UnsupportedTypeError: If the name is not registered
        """
        with self._registry_lock:
            factory = self._factories.get(type_name)
        if factory is None:
            raise UnsupportedTypeError(self.kind, type_name, self.get_registered_types())
        return factory()

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._factories

    def get_registered_types(self) -> List[str]:
        """Registered names in registration order."""
        with self._registry_lock:
            return list(self._factories)
