"""Single-purpose order collaborators."""

from solid_principles.domain.order.ports import OrderCommunicationPort, OrderPersistencePort


class OrderDBManagement(OrderPersistencePort):
    """Stores orders."""

    def save_order_to_db(self, order_id: int) -> None:
        print(f"Saving order {order_id} to database")


class OrderCommunication(OrderCommunicationPort):
    """Emails customers about orders."""

    def send_order_email(self, order_id: int) -> None:
        print(f"Sending order email for order: {order_id}")
