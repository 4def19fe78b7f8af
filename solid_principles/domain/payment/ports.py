"""Payment capability."""

from abc import ABC, abstractmethod


class PaymentType(ABC):
    """A way of paying an amount."""

    @abstractmethod
    def process_payment(self, amount: float) -> None:
        """Process a payment of the given amount."""
