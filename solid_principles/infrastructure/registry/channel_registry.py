"""Registry of notification channels."""

from solid_principles.domain.notification import CommunicationService, EmailService, SMSService
from solid_principles.infrastructure.registry.base_registry import BaseRegistry


class CommunicationChannelRegistry(BaseRegistry[CommunicationService]):
    """Maps channel names to communication services."""

    kind = "channel"


def create_channel_registry() -> CommunicationChannelRegistry:
    """Registry pre-loaded with the built-in channels."""
    registry = CommunicationChannelRegistry()
    registry.register("email", EmailService)
    registry.register("sms", SMSService)
    return registry
