"""Payment kinds.

New kinds are added here (or anywhere else) by subclassing PaymentType;
Payment itself never changes.
"""

from solid_principles.domain.payment.ports import PaymentType


class CreditCardPayment(PaymentType):
    """Credit card payment."""

    def process_payment(self, amount: float) -> None:
        print(f"Processing credit card payment: {float(amount)}")


class PaypalPayment(PaymentType):
    """PayPal payment."""

    def process_payment(self, amount: float) -> None:
        print(f"Processing PayPal payment: {float(amount)}")
