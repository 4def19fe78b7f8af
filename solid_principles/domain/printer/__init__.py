"""Printer example (Interface Segregation)."""

from .devices import AdvancedPrinter, BasicPrinter, supported_capabilities
from .ports import CAPABILITIES, Faxable, Printable, Scanable

__all__ = [
    "Printable",
    "Scanable",
    "Faxable",
    "CAPABILITIES",
    "BasicPrinter",
    "AdvancedPrinter",
    "supported_capabilities",
]
