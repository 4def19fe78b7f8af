"""Registry of payment types."""

from solid_principles.domain.payment import CreditCardPayment, PaymentType, PaypalPayment
from solid_principles.infrastructure.registry.base_registry import BaseRegistry


class PaymentTypeRegistry(BaseRegistry[PaymentType]):
    """Maps payment type names to payment implementations."""

    kind = "payment"


def create_payment_registry() -> PaymentTypeRegistry:
    """Registry pre-loaded with the built-in payment types."""
    registry = PaymentTypeRegistry()
    registry.register("credit_card", CreditCardPayment)
    registry.register("paypal", PaypalPayment)
    return registry
