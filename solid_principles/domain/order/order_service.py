"""Order service delegating persistence and communication."""

import logging

from solid_principles.domain.order.ports import OrderCommunicationPort, OrderPersistencePort

logger = logging.getLogger(__name__)


class OrderService:
    """
    Processes orders.

    Storage and customer email belong to the injected collaborators; this
    class only owns the processing step.
    """

    def __init__(self, order_db: OrderPersistencePort, order_comm: OrderCommunicationPort):
        self.order_db = order_db
        self.order_comm = order_comm

    def process_order(self, order_id: int) -> None:
        """Run order processing."""
        print(f"Processing order: {order_id}")

    def send_order_email(self, order_id: int) -> None:
        """Hand the order email to the communication collaborator."""
        logger.debug("Delegating order email for %s", order_id)
        self.order_comm.send_order_email(order_id)

    def save_order_to_database(self, order_id: int) -> None:
        """Hand the order to the persistence collaborator."""
        logger.debug("Delegating save for order %s", order_id)
        self.order_db.save_order_to_db(order_id)
