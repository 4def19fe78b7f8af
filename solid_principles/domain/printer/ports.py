"""Segregated device capabilities.

Each capability is its own interface so a device only promises what it can
actually do.
"""

from abc import ABC, abstractmethod


class Printable(ABC):
    """Device can print."""

    @abstractmethod
    def print_document(self) -> None:
        """Print a document."""


class Scanable(ABC):
    """Device can scan."""

    @abstractmethod
    def scan_document(self) -> None:
        """Scan a document."""


class Faxable(ABC):
    """Device can fax."""

    @abstractmethod
    def fax_document(self) -> None:
        """Fax a document."""


CAPABILITIES = (Printable, Scanable, Faxable)
