"""Payment orchestrator."""

import logging

from solid_principles.domain.payment.ports import PaymentType

logger = logging.getLogger(__name__)


class Payment:
    """Pays with whatever payment type it is handed."""

    def pay(self, payment_type: PaymentType, amount: float) -> None:
        """Delegate the amount to the payment type."""
        logger.debug("Delegating payment of %s", amount)
        payment_type.process_payment(amount)
