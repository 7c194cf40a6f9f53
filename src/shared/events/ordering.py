"""Cross-domain event contracts for Ordering domain events.

Consumed by the Seller Dashboard domain to attribute order lines to sellers
and follow their status.

The source-of-truth events are in src/ordering/order/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String, Text


class OrderPlaced(BaseEvent):
    """A PENDING order was created from the caller's cart."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON list of {product_id, quantity, amount, currency}
    total_amount = Float(required=True)
    currency = String(required=True)
    placed_at = DateTime(required=True)


class OrderCancelled(BaseEvent):
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reason = String()
    cancelled_at = DateTime(required=True)


class OrderConfirmed(BaseEvent):
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    payment_id = String()
    confirmed_at = DateTime(required=True)


class OrderShipped(BaseEvent):
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shipped_at = DateTime(required=True)


class OrderDelivered(BaseEvent):
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    delivered_at = DateTime(required=True)
