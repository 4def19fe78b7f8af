"""Order collaborator ports, one responsibility each."""

from abc import ABC, abstractmethod


class OrderPersistencePort(ABC):
    """Port for storing orders."""

    @abstractmethod
    def save_order_to_db(self, order_id: int) -> None:
        """Persist the order."""


class OrderCommunicationPort(ABC):
    """Port for telling the customer about an order."""

    @abstractmethod
    def send_order_email(self, order_id: int) -> None:
        """Send the order email."""
