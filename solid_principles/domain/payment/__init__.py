"""Payment example (Open/Closed)."""

from .methods import CreditCardPayment, PaypalPayment
from .payment import Payment
from .ports import PaymentType

__all__ = ["PaymentType", "CreditCardPayment", "PaypalPayment", "Payment"]
