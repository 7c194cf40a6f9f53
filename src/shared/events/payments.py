"""Cross-domain event contracts for Payments domain events.

PaymentCompleted confirms the order in the Ordering domain; both events
trigger emails in the Notifications domain.

The source-of-truth events are in src/payments/payment/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String


class PaymentCompleted(BaseEvent):
    """A payment was verified against the gateway signature."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    email = String()
    username = String()
    gateway_payment_id = String(required=True)
    amount = Float(required=True)  # major currency units
    currency = String(required=True)
    completed_at = DateTime(required=True)


class PaymentFailed(BaseEvent):
    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    email = String()
    username = String()
    reason = String(required=True)
    failed_at = DateTime(required=True)
