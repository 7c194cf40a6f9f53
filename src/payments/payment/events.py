"""Domain events for the Payment aggregate.

PaymentCompleted and PaymentFailed are consumed by the Ordering and
Notifications domains; their shapes are mirrored in shared.events.payments.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String

from payments.domain import payments


@payments.event(part_of="Payment")
class PaymentInitiated:
    """A gateway order was created and a PENDING payment recorded for it."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    razorpay_order_id = String(required=True)
    amount = Integer(required=True)  # smallest currency unit
    currency = String(required=True)
    initiated_at = DateTime(required=True)


@payments.event(part_of="Payment")
class PaymentCompleted:
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


@payments.event(part_of="Payment")
class PaymentFailed:
    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    email = String()
    username = String()
    reason = String(required=True)
    failed_at = DateTime(required=True)
