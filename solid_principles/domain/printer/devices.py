"""Printer devices implementing subsets of the device capabilities."""

from typing import List

from solid_principles.domain.printer.ports import CAPABILITIES, Faxable, Printable, Scanable


class BasicPrinter(Printable):
    """Print-only device."""

    def print_document(self) -> None:
        print("Printing document...")


class AdvancedPrinter(Printable, Scanable, Faxable):
    """Multi-function device."""

    def print_document(self) -> None:
        print("Printing document...")

    def scan_document(self) -> None:
        print("Scanning document...")

    def fax_document(self) -> None:
        print("Faxing document...")


def supported_capabilities(device: object) -> List[str]:
    """Return the names of the capability interfaces a device declares."""
    return [capability.__name__ for capability in CAPABILITIES if isinstance(device, capability)]
