"""Inbound cross-domain event handler: Ordering reacts to Payments events.

A completed payment confirms its order. Orders that are no longer PENDING
(cancelled while the buyer was paying) are left alone and logged.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.payments import PaymentCompleted

from ordering.domain import ordering
from ordering.order.fulfillment import ConfirmOrder
from ordering.order.order import Order

logger = structlog.get_logger(__name__)

ordering.register_external_event(PaymentCompleted, "Payments.PaymentCompleted.v1")


@ordering.event_handler(part_of=Order, stream_category="payments::payment")
class PaymentOrderEventHandler:
    @handle(PaymentCompleted)
    def on_payment_completed(self, event: PaymentCompleted) -> None:
        try:
            order = current_domain.repository_for(Order).get(str(event.order_id))
        except ObjectNotFoundError:
            logger.warning("Payment completed for unknown order", order_id=str(event.order_id))
            return

        if not order.is_pending:
            logger.warning(
                "Payment completed for an order that is not pending",
                order_id=str(order.id),
                status=order.status,
            )
            return

        current_domain.process(
            ConfirmOrder(order_id=str(event.order_id), payment_id=str(event.payment_id)),
            asynchronous=False,
        )
        logger.info("Order confirmed after payment", order_id=str(event.order_id))
