"""Notification example (Dependency Inversion)."""

from .notification_manager import NotificationManager
from .ports import CommunicationService
from .services import EmailService, SMSService

__all__ = [
    "CommunicationService",
    "EmailService",
    "SMSService",
    "NotificationManager",
]
