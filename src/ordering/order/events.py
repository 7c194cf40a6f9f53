"""Domain events for the Order aggregate.

OrderPlaced and the status events are consumed by the Seller Dashboard;
their shapes are mirrored in shared.events.ordering.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A PENDING order was created from the caller's cart."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON list of {product_id, quantity, amount, currency}
    total_amount = Float(required=True)
    currency = String(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reason = String()
    cancelled_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderAddressUpdated:
    """The shipping address of a PENDING order was replaced."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON address dict
    updated_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderConfirmed:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    payment_id = String()
    confirmed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderShipped:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shipped_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderDelivered:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    delivered_at = DateTime(required=True)
