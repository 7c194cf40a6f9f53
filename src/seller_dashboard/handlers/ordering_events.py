"""Inbound cross-domain event handler: Seller Dashboard reacts to Ordering events.

Each placed order is split into one SellerOrderLine per product; later status
events move every line of the order along.
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.ordering import OrderCancelled, OrderConfirmed, OrderDelivered, OrderPlaced, OrderShipped

from seller_dashboard.domain import seller_dashboard
from seller_dashboard.projections.seller_order_line import SellerOrderLine, line_id
from seller_dashboard.projections.seller_product import SellerProduct

logger = structlog.get_logger(__name__)

seller_dashboard.register_external_event(OrderPlaced, "Ordering.OrderPlaced.v1")
seller_dashboard.register_external_event(OrderCancelled, "Ordering.OrderCancelled.v1")
seller_dashboard.register_external_event(OrderConfirmed, "Ordering.OrderConfirmed.v1")
seller_dashboard.register_external_event(OrderShipped, "Ordering.OrderShipped.v1")
seller_dashboard.register_external_event(OrderDelivered, "Ordering.OrderDelivered.v1")


def _seller_of(product_id: str) -> str | None:
    try:
        return str(current_domain.repository_for(SellerProduct).get(product_id).seller_id)
    except ObjectNotFoundError:
        return None


def _set_status(order_id, status: str, at) -> None:
    repo = current_domain.repository_for(SellerOrderLine)
    for line in repo._dao.query.filter(order_id=str(order_id)).limit(None).all().items:
        line.status = status
        line.updated_at = at
        repo.add(line)


@seller_dashboard.event_handler(stream_category="ordering::order")
class OrderingEventsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        repo = current_domain.repository_for(SellerOrderLine)
        for item in json.loads(event.items):
            product_id = str(item["product_id"])
            seller_id = _seller_of(product_id)
            if seller_id is None:
                logger.warning(
                    "Skipping order line for product with no known seller",
                    order_id=str(event.order_id),
                    product_id=product_id,
                )
                continue

            repo.add(
                SellerOrderLine(
                    line_id=line_id(event.order_id, product_id),
                    seller_id=seller_id,
                    order_id=str(event.order_id),
                    user_id=str(event.user_id),
                    product_id=product_id,
                    quantity=item["quantity"],
                    amount=item["amount"],
                    currency=item.get("currency") or event.currency,
                    status="PENDING",
                    placed_at=event.placed_at,
                    updated_at=event.placed_at,
                )
            )

    @handle(OrderCancelled)
    def on_order_cancelled(self, event: OrderCancelled) -> None:
        _set_status(event.order_id, "CANCELLED", event.cancelled_at)

    @handle(OrderConfirmed)
    def on_order_confirmed(self, event: OrderConfirmed) -> None:
        _set_status(event.order_id, "CONFIRMED", event.confirmed_at)

    @handle(OrderShipped)
    def on_order_shipped(self, event: OrderShipped) -> None:
        _set_status(event.order_id, "SHIPPED", event.shipped_at)

    @handle(OrderDelivered)
    def on_order_delivered(self, event: OrderDelivered) -> None:
        _set_status(event.order_id, "DELIVERED", event.delivered_at)
