"""Notification manager depending only on the communication port."""

import logging

from solid_principles.domain.notification.ports import CommunicationService

logger = logging.getLogger(__name__)


class NotificationManager:
    """
    Sends notifications through whichever channel it was given.

    The manager does not know which channel it holds; the caller picks the
    implementation and passes it in.
    """

    def __init__(self, communication_service: CommunicationService):
        self._communication_service = communication_service

    @property
    def communication_service(self) -> CommunicationService:
        return self._communication_service

    def send_notification(self, recipient: str, message: str) -> None:
        """Forward recipient and message unchanged to the held channel."""
        logger.debug("Dispatching notification to %s", recipient)
        self._communication_service.send_notification(recipient, message)
