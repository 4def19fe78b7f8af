"""Communication port for notification delivery."""

from abc import ABC, abstractmethod


class CommunicationService(ABC):
    """Port for delivering a message to a recipient over some channel."""

    @abstractmethod
    def send_notification(self, recipient: str, message: str) -> None:
        """Deliver message to recipient."""
