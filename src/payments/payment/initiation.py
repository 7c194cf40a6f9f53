"""Payment initiation: open a gateway order for an order's total."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from payments.clients import get_order_client
from payments.domain import logger, payments
from payments.gateway import get_gateway
from payments.payment.payment import Payment, to_minor_units


@payments.command(part_of="Payment")
class CreatePayment:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    razorpay_order_id = String(required=True, max_length=255)
    amount = Integer(required=True, min_value=0)  # smallest currency unit
    currency = String(required=True, max_length=3)


@payments.command_handler(part_of=Payment)
class CreatePaymentHandler:
    @handle(CreatePayment)
    def create_payment(self, command):
        payment = Payment.initiate(
            order_id=command.order_id,
            user_id=command.user_id,
            razorpay_order_id=command.razorpay_order_id,
            amount=command.amount,
            currency=command.currency,
        )
        current_domain.repository_for(Payment).add(payment)
        logger.info(
            "Payment initiated",
            payment_id=str(payment.id),
            order_id=str(command.order_id),
            amount=command.amount,
            currency=command.currency,
        )
        return str(payment.id)


async def initiate_payment(order_id: str, user_id: str, token: str) -> str:
    """Create a gateway order for the order's total and record it as PENDING.

    Raises OrderServiceError when the order cannot be read and
    PaymentGatewayError when the gateway refuses the order.
    """
    order = await get_order_client().get_order(order_id, token)
    gateway_order = await get_gateway().create_order(
        amount=to_minor_units(order.total_amount),
        currency=order.currency,
        receipt=str(order_id),
    )
    return current_domain.process(
        CreatePayment(
            order_id=order_id,
            user_id=user_id,
            razorpay_order_id=gateway_order.id,
            amount=gateway_order.amount,
            currency=gateway_order.currency,
        ),
        asynchronous=False,
    )
