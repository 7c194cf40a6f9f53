"""Order aggregate: the purchase of a cart's contents by one user.

State machine:
    PENDING → CONFIRMED → SHIPPED → DELIVERED
    PENDING → CANCELLED

Only PENDING orders can be cancelled or have their shipping address changed.
Prices are captured at placement time and never recalculated.
"""

import json
import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import (
    OrderAddressUpdated,
    OrderCancelled,
    OrderConfirmed,
    OrderDelivered,
    OrderPlaced,
    OrderShipped,
)

PINCODE_PATTERN = re.compile(r"^\d{6}$")
ORDER_CURRENCY = "INR"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.CANCELLED: set(),  # Terminal
    OrderStatus.DELIVERED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class Money:
    amount = Float(required=True, min_value=0.0)
    currency = String(max_length=3, default=ORDER_CURRENCY)


@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order is delivered; a snapshot, not a link to the address book."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    country = String(required=True, max_length=100)
    pincode = String(required=True, max_length=6)

    @invariant.post
    def pincode_has_six_digits(self):
        if self.pincode and not PINCODE_PATTERN.match(self.pincode):
            raise ValidationError({"pincode": ["Pincode must be exactly 6 digits"]})

    def to_dict(self) -> dict:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "pincode": self.pincode,
        }


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """One cart line frozen into the order. `price` is the line total."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = ValueObject(Money, required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    total_price = ValueObject(Money, required=True)
    shipping_address = ValueObject(ShippingAddress, required=True)
    cancellation_reason = String(max_length=500)
    payment_id = String(max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, lines, shipping_address):
        """Create a PENDING order.

        Args:
            user_id: The buyer.
            lines: List of dicts with product_id, quantity, amount (line
                total) and currency.
            shipping_address: Dict with street, city, state, country, pincode.
        """
        if not lines:
            raise ValidationError({"items": ["Cart is empty"]})

        now = datetime.now(UTC)
        total = sum(line["amount"] for line in lines)

        order = cls(
            user_id=user_id,
            total_price=Money(amount=total, currency=ORDER_CURRENCY),
            shipping_address=ShippingAddress(**shipping_address),
            created_at=now,
            updated_at=now,
        )
        for line in lines:
            order.add_items(
                OrderItem(
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    price=Money(amount=line["amount"], currency=line.get("currency") or ORDER_CURRENCY),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                items=json.dumps(
                    [
                        {
                            "product_id": str(item.product_id),
                            "quantity": item.quantity,
                            "amount": item.price.amount,
                            "currency": item.price.currency,
                        }
                        for item in order.items
                    ]
                ),
                total_amount=total,
                currency=ORDER_CURRENCY,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def is_owned_by(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    @property
    def is_pending(self) -> bool:
        return OrderStatus(self.status) == OrderStatus.PENDING

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def can_transition_to(self, target_status: OrderStatus) -> bool:
        return target_status in _VALID_TRANSITIONS.get(OrderStatus(self.status), set())

    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if not self.can_transition_to(target_status):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def cancel(self, reason=None):
        if not self.is_pending:
            raise ValidationError({"status": ["Your order cannot be cancelled at this stage"]})

        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.cancellation_reason = reason
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                user_id=str(self.user_id),
                reason=reason,
                cancelled_at=now,
            )
        )

    def update_address(self, shipping_address):
        if not self.is_pending:
            raise ValidationError({"status": ["Order address cannot be updated at this stage"]})

        now = datetime.now(UTC)
        self.shipping_address = ShippingAddress(**shipping_address)
        self.updated_at = now

        self.raise_(
            OrderAddressUpdated(
                order_id=str(self.id),
                user_id=str(self.user_id),
                shipping_address=json.dumps(self.shipping_address.to_dict()),
                updated_at=now,
            )
        )

    def confirm(self, payment_id=None):
        self._assert_can_transition(OrderStatus.CONFIRMED)

        now = datetime.now(UTC)
        self.status = OrderStatus.CONFIRMED.value
        self.payment_id = payment_id
        self.updated_at = now

        self.raise_(
            OrderConfirmed(
                order_id=str(self.id),
                user_id=str(self.user_id),
                payment_id=payment_id,
                confirmed_at=now,
            )
        )

    def ship(self):
        self._assert_can_transition(OrderStatus.SHIPPED)

        now = datetime.now(UTC)
        self.status = OrderStatus.SHIPPED.value
        self.updated_at = now

        self.raise_(OrderShipped(order_id=str(self.id), user_id=str(self.user_id), shipped_at=now))

    def deliver(self):
        self._assert_can_transition(OrderStatus.DELIVERED)

        now = datetime.now(UTC)
        self.status = OrderStatus.DELIVERED.value
        self.updated_at = now

        self.raise_(OrderDelivered(order_id=str(self.id), user_id=str(self.user_id), delivered_at=now))
