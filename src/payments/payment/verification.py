"""Payment verification: settle a PENDING payment from the checkout result."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import String
from protean.utils.globals import current_domain

from payments.domain import logger, payments
from payments.payment.payment import Payment, PaymentStatus


@payments.command(part_of="Payment")
class VerifyPayment:
    razorpay_order_id = String(required=True, max_length=255)
    payment_id = String(required=True, max_length=255)
    signature = String(required=True, max_length=255)
    email = String(max_length=254)
    username = String(max_length=50)


@payments.command(part_of="Payment")
class RecordPaymentFailure:
    razorpay_order_id = String(required=True, max_length=255)
    reason = String(required=True, max_length=500)
    email = String(max_length=254)
    username = String(max_length=50)


def find_pending_payment(razorpay_order_id: str):
    """Return the PENDING payment for a gateway order, or None."""
    matches = (
        current_domain.repository_for(Payment)
        ._dao.query.filter(razorpay_order_id=razorpay_order_id, status=PaymentStatus.PENDING.value)
        .all()
        .items
    )
    return matches[0] if matches else None


def _pending_payment(razorpay_order_id: str):
    payment = find_pending_payment(razorpay_order_id)
    if payment is None:
        raise ObjectNotFoundError(f"Payment not found for gateway order {razorpay_order_id}")
    return payment


@payments.command_handler(part_of=Payment)
class VerifyPaymentHandler:
    @handle(VerifyPayment)
    def verify_payment(self, command):
        payment = _pending_payment(command.razorpay_order_id)
        payment.complete(
            gateway_payment_id=command.payment_id,
            signature=command.signature,
            email=command.email,
            username=command.username,
        )
        current_domain.repository_for(Payment).add(payment)
        logger.info("Payment completed", payment_id=str(payment.id), order_id=str(payment.order_id))
        return str(payment.id)

    @handle(RecordPaymentFailure)
    def record_payment_failure(self, command):
        payment = _pending_payment(command.razorpay_order_id)
        payment.fail(reason=command.reason, email=command.email, username=command.username)
        current_domain.repository_for(Payment).add(payment)
        logger.warning(
            "Payment failed",
            payment_id=str(payment.id),
            order_id=str(payment.order_id),
            reason=command.reason,
        )
        return str(payment.id)
