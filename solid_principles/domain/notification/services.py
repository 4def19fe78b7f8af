"""Concrete communication channels."""

from solid_principles.domain.notification.ports import CommunicationService


class EmailService(CommunicationService):
    """Delivers notifications by email."""

    def send_notification(self, recipient: str, message: str) -> None:
        print(f"Sending email to {recipient}: {message}")


class SMSService(CommunicationService):
    """Delivers notifications by SMS."""

    def send_notification(self, recipient: str, message: str) -> None:
        print(f"Sending SMS to {recipient}: {message}")
