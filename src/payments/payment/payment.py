"""Payment aggregate: one gateway checkout for one order.

State Machine:
    PENDING → COMPLETED
    PENDING → FAILED

Amounts are held in the smallest currency unit (paise for INR), the way the
gateway expects them; events that leave the context carry major units.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, ValueObject

from payments.domain import payments
from payments.payment.events import PaymentCompleted, PaymentFailed, PaymentInitiated

MINOR_UNITS_PER_MAJOR = 100


class PaymentStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


def to_minor_units(amount: float) -> int:
    return int(round(amount * MINOR_UNITS_PER_MAJOR))


@payments.value_object(part_of="Payment")
class Money:
    """Amount in the smallest currency unit."""

    amount = Integer(required=True, min_value=0)
    currency = String(max_length=3, default="INR")

    @property
    def major_amount(self) -> float:
        return self.amount / MINOR_UNITS_PER_MAJOR


@payments.aggregate
class Payment:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    razorpay_order_id = String(required=True, max_length=255, unique=True)
    payment_id = String(max_length=255)
    signature = String(max_length=255)
    price = ValueObject(Money, required=True)
    status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    failure_reason = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def initiate(cls, order_id, user_id, razorpay_order_id, amount, currency):
        """Record a PENDING payment for a gateway order of `amount` minor units."""
        now = datetime.now(UTC)
        payment = cls(
            order_id=order_id,
            user_id=user_id,
            razorpay_order_id=razorpay_order_id,
            price=Money(amount=amount, currency=currency),
            created_at=now,
            updated_at=now,
        )
        payment.raise_(
            PaymentInitiated(
                payment_id=str(payment.id),
                order_id=str(order_id),
                user_id=str(user_id),
                razorpay_order_id=razorpay_order_id,
                amount=amount,
                currency=currency,
                initiated_at=now,
            )
        )
        return payment

    @property
    def is_pending(self) -> bool:
        return PaymentStatus(self.status) == PaymentStatus.PENDING

    def _assert_pending(self) -> None:
        if not self.is_pending:
            raise ValidationError({"status": [f"Payment is already {self.status}"]})

    def complete(self, gateway_payment_id, signature, email=None, username=None):
        self._assert_pending()

        now = datetime.now(UTC)
        self.payment_id = gateway_payment_id
        self.signature = signature
        self.status = PaymentStatus.COMPLETED.value
        self.updated_at = now

        self.raise_(
            PaymentCompleted(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                user_id=str(self.user_id),
                email=email,
                username=username,
                gateway_payment_id=gateway_payment_id,
                amount=self.price.major_amount,
                currency=self.price.currency,
                completed_at=now,
            )
        )

    def fail(self, reason, email=None, username=None):
        self._assert_pending()

        now = datetime.now(UTC)
        self.status = PaymentStatus.FAILED.value
        self.failure_reason = reason
        self.updated_at = now

        self.raise_(
            PaymentFailed(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                user_id=str(self.user_id),
                email=email,
                username=username,
                reason=reason,
                failed_at=now,
            )
        )
