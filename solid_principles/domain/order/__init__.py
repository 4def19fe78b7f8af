"""Order example (Single Responsibility)."""

from .collaborators import OrderCommunication, OrderDBManagement
from .order_service import OrderService
from .ports import OrderCommunicationPort, OrderPersistencePort

__all__ = [
    "OrderPersistencePort",
    "OrderCommunicationPort",
    "OrderDBManagement",
    "OrderCommunication",
    "OrderService",
]
