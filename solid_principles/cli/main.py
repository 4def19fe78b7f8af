"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Wiring of configuration, logging and the service container
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from solid_principles import __version__
from solid_principles.cli.formatters import format_output
from solid_principles.config import ConfigurationManager
from solid_principles.domain.base.exceptions import DomainException
from solid_principles.domain.notification import NotificationManager
from solid_principles.domain.order import OrderService
from solid_principles.domain.payment import Payment, PaymentType
from solid_principles.domain.printer import (
    AdvancedPrinter,
    BasicPrinter,
    Faxable,
    Printable,
    Scanable,
    supported_capabilities,
)
from solid_principles.domain.shape import Rectangle, Shape, Square
from solid_principles.infrastructure.di import DependencyResolutionError, DIContainer, register_all_services
from solid_principles.infrastructure.logging.logger import get_logger, setup_logging
from solid_principles.infrastructure.registry import CommunicationChannelRegistry, PaymentTypeRegistry

logger = get_logger(__name__)

PRINTER_DEVICES: Dict[str, Callable[[], Any]] = {
    "basic": BasicPrinter,
    "advanced": AdvancedPrinter,
}

# Each action is bound to the capability interface that offers it
PRINTER_ACTIONS: Dict[str, Any] = {
    "print": (Printable, lambda device: device.print_document()),
    "scan": (Scanable, lambda device: device.scan_document()),
    "fax": (Faxable, lambda device: device.fax_document()),
}


class CommandError(DomainException):
    """Raised when a command cannot be carried out as requested."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="solid-examples",
        description="SOLID principles examples - capability-oriented service composition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s notify alice@example.com "Hello"       # Notify over the configured channel
  %(prog)s notify --channel sms +15550100 "Hi"   # Notify over SMS
  %(prog)s printer advanced scan                 # Scan with a multi-function device
  %(prog)s shape rectangle 2 3                   # Area of a 2x3 rectangle
  %(prog)s pay --type paypal 100                 # Pay 100 with PayPal
  %(prog)s order all 42                          # Process, save and email order 42
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument(
        "--format", choices=["text", "json", "yaml"], default="text", help="Output format"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available examples")
    subparsers.required = True

    # Notification (Dependency Inversion)
    notify_parser = subparsers.add_parser("notify", help="Send a notification")
    notify_parser.add_argument("--channel", help="Channel name (default: from configuration)")
    notify_parser.add_argument("recipient", help="Notification recipient")
    notify_parser.add_argument("message", help="Notification message")

    # Printer (Interface Segregation)
    printer_parser = subparsers.add_parser("printer", help="Use a printer device")
    printer_parser.add_argument("device", choices=list(PRINTER_DEVICES), help="Device model")
    printer_parser.add_argument(
        "action", choices=[*PRINTER_ACTIONS, "capabilities"], help="Action to perform"
    )

    # Shape (Liskov Substitution)
    shape_parser = subparsers.add_parser("shape", help="Compute a shape's area")
    shape_subparsers = shape_parser.add_subparsers(dest="shape", help="Shape kind")
    shape_subparsers.required = True
    rectangle_parser = shape_subparsers.add_parser("rectangle", help="Rectangle area")
    rectangle_parser.add_argument("width", type=float, help="Rectangle width")
    rectangle_parser.add_argument("height", type=float, help="Rectangle height")
    square_parser = shape_subparsers.add_parser("square", help="Square area")
    square_parser.add_argument("side", type=float, help="Side length")

    # Payment (Open/Closed)
    pay_parser = subparsers.add_parser("pay", help="Make a payment")
    pay_parser.add_argument("--type", dest="payment_type", help="Payment type (default: from configuration)")
    pay_parser.add_argument("amount", type=float, help="Amount to pay")

    # Order (Single Responsibility)
    order_parser = subparsers.add_parser("order", help="Handle an order")
    order_parser.add_argument("action", choices=["process", "save", "email", "all"], help="Order step")
    order_parser.add_argument("order_id", type=int, help="Order identifier")

    subparsers.add_parser("demo", help="Run every example once")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def handle_notify(args: argparse.Namespace, container: DIContainer) -> None:
    if args.channel:
        channel = container.get(CommunicationChannelRegistry).create(args.channel)
        manager = NotificationManager(channel)
    else:
        manager = container.get(NotificationManager)
    manager.send_notification(args.recipient, args.message)


def handle_printer(args: argparse.Namespace, container: DIContainer) -> Optional[Dict[str, Any]]:
    device = PRINTER_DEVICES[args.device]()
    if args.action == "capabilities":
        return {"device": args.device, "capabilities": supported_capabilities(device)}

    capability, operation = PRINTER_ACTIONS[args.action]
    if not isinstance(device, capability):
        raise CommandError(
            f"The {args.device} printer does not support '{args.action}' "
            f"(capabilities: {', '.join(supported_capabilities(device))})"
        )
    operation(device)
    return None


def handle_shape(args: argparse.Namespace, container: DIContainer) -> Dict[str, Any]:
    if args.shape == "rectangle":
        shape: Shape = Rectangle(width=args.width, height=args.height)
    else:
        shape = Square(side=args.side)
    return {"shape": args.shape, **shape.model_dump(), "area": shape.area()}


def handle_pay(args: argparse.Namespace, container: DIContainer) -> None:
    if args.payment_type:
        payment_type = container.get(PaymentTypeRegistry).create(args.payment_type)
    else:
        payment_type = container.get(PaymentType)
    container.get(Payment).pay(payment_type, args.amount)


def handle_order(args: argparse.Namespace, container: DIContainer) -> None:
    service = container.get(OrderService)
    if args.action in ("process", "all"):
        service.process_order(args.order_id)
    if args.action in ("save", "all"):
        service.save_order_to_database(args.order_id)
    if args.action in ("email", "all"):
        service.send_order_email(args.order_id)


def handle_demo(args: argparse.Namespace, container: DIContainer) -> None:
    container.get(NotificationManager).send_notification("user@example.com", "Welcome!")

    for device_name in PRINTER_DEVICES:
        device = PRINTER_DEVICES[device_name]()
        for action, (capability, operation) in PRINTER_ACTIONS.items():
            if isinstance(device, capability):
                operation(device)

    for shape in (Rectangle(width=2, height=3), Square(side=4)):
        print(f"{type(shape).__name__} area: {shape.area()}")

    payment = container.get(Payment)
    registry = container.get(PaymentTypeRegistry)
    for payment_name in registry.get_registered_types():
        payment.pay(registry.create(payment_name), 100.0)

    service = container.get(OrderService)
    service.process_order(42)
    service.save_order_to_database(42)
    service.send_order_email(42)


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace, DIContainer], Any]] = {
    "notify": handle_notify,
    "printer": handle_printer,
    "shape": handle_shape,
    "pay": handle_pay,
    "order": handle_order,
    "demo": handle_demo,
}


def execute_command(args: argparse.Namespace, container: DIContainer) -> Any:
    """Execute the appropriate command handler."""
    handler = COMMAND_HANDLERS[args.command]
    logger.debug("Executing command", command=args.command)
    return handler(args, container)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    # Console defaults until the configured logging is in place
    setup_logging()

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
        if args.log_level:
            app_config = app_config.model_copy(
                update={"logging": app_config.logging.model_copy(update={"level": args.log_level})}
            )

        setup_logging(app_config.logging)
        container = register_all_services(config=app_config)

        result = execute_command(args, container)
        if result is not None:
            print(format_output(result, args.format))
        return 0
    except (DomainException, DependencyResolutionError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
