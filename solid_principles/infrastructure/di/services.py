"""Service registration for dependency injection.

This module is the composition root: it decides which variant each
orchestrator receives.
- Registries (communication channels, payment types)
- Notification manager bound to the configured channel
- Payment orchestrator
- Order service with its persistence and communication collaborators
"""

from typing import Optional

from solid_principles.config.schemas import AppConfig
from solid_principles.domain.notification import CommunicationService, NotificationManager
from solid_principles.domain.order import (
    OrderCommunication,
    OrderCommunicationPort,
    OrderDBManagement,
    OrderPersistencePort,
    OrderService,
)
from solid_principles.domain.payment import Payment, PaymentType
from solid_principles.infrastructure.di.container import DIContainer
from solid_principles.infrastructure.logging.logger import get_logger
from solid_principles.infrastructure.registry import (
    CommunicationChannelRegistry,
    PaymentTypeRegistry,
    create_channel_registry,
    create_payment_registry,
)

logger = get_logger(__name__)


def register_all_services(
    container: Optional[DIContainer] = None, config: Optional[AppConfig] = None
) -> DIContainer:
    """
    Register all services in the dependency injection container.

    Args:
        container: Optional container instance
        config: Application configuration; defaults are used when omitted

    Returns:
        Configured container
    """
    if container is None:
        container = DIContainer()
    if config is None:
        config = AppConfig()

    container.register_instance(AppConfig, config)

    # 1. Registries
    container.register_singleton(CommunicationChannelRegistry, lambda c: create_channel_registry())
    container.register_singleton(PaymentTypeRegistry, lambda c: create_payment_registry())

    # 2. Notification
    container.register_singleton(
        CommunicationService,
        lambda c: c.get(CommunicationChannelRegistry).create(c.get(AppConfig).notification.channel),
    )
    container.register_singleton(
        NotificationManager,
        lambda c: NotificationManager(c.get(CommunicationService, NotificationManager)),
    )

    # 3. Payment
    container.register_singleton(Payment)
    container.register_factory(
        PaymentType,
        lambda c: c.get(PaymentTypeRegistry).create(c.get(AppConfig).payment.default_type),
    )

    # 4. Order
    container.register_singleton(OrderPersistencePort, lambda c: OrderDBManagement())
    container.register_singleton(OrderCommunicationPort, lambda c: OrderCommunication())
    container.register_singleton(
        OrderService,
        lambda c: OrderService(
            order_db=c.get(OrderPersistencePort, OrderService),
            order_comm=c.get(OrderCommunicationPort, OrderService),
        ),
    )

    logger.debug(
        "Services registered",
        notification_channel=config.notification.channel,
        payment_type=config.payment.default_type,
    )
    return container
