import pytest

from solid_principles.domain.printer import (
    AdvancedPrinter,
    BasicPrinter,
    Faxable,
    Printable,
    Scanable,
    supported_capabilities,
)


def test_basic_printer_prints(capsys):
    BasicPrinter().print_document()

    assert capsys.readouterr().out == "Printing document...\n"


def test_advanced_printer_actions(capsys):
    printer = AdvancedPrinter()

    printer.print_document()
    printer.scan_document()
    printer.fax_document()

    assert capsys.readouterr().out.splitlines() == [
        "Printing document...",
        "Scanning document...",
        "Faxing document...",
    ]


def test_basic_printer_declares_only_printable():
    printer = BasicPrinter()

    assert isinstance(printer, Printable)
    assert not isinstance(printer, Scanable)
    assert not isinstance(printer, Faxable)


def test_basic_printer_has_no_unsupported_operations():
    printer = BasicPrinter()

    assert not hasattr(printer, "scan_document")
    assert not hasattr(printer, "fax_document")


def test_advanced_printer_declares_all_capabilities():
    printer = AdvancedPrinter()

    assert all(isinstance(printer, cap) for cap in (Printable, Scanable, Faxable))


@pytest.mark.parametrize(
    "device, expected",
    [
        (BasicPrinter(), ["Printable"]),
        (AdvancedPrinter(), ["Printable", "Scanable", "Faxable"]),
        (object(), []),
    ],
)
def test_supported_capabilities(device, expected):
    assert supported_capabilities(device) == expected


def test_partial_capability_set_is_possible(capsys):
    class ScanOnlyDevice(Scanable):
        def scan_document(self) -> None:
            print("Scanning document...")

    device = ScanOnlyDevice()
    device.scan_document()

    assert supported_capabilities(device) == ["Scanable"]
    assert capsys.readouterr().out == "Scanning document...\n"


def test_capability_without_implementation_cannot_be_instantiated():
    class BrokenFax(Faxable):
        pass

    with pytest.raises(TypeError):
        BrokenFax()
