"""Infrastructure registry patterns."""

from .base_registry import BaseRegistry
from .channel_registry import CommunicationChannelRegistry, create_channel_registry
from .payment_registry import PaymentTypeRegistry, create_payment_registry

__all__ = [
    "BaseRegistry",
    "CommunicationChannelRegistry",
    "PaymentTypeRegistry",
    "create_channel_registry",
    "create_payment_registry",
]
