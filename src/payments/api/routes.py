"""FastAPI endpoints for the Payments domain."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from shared.auth import CurrentUser, authenticate

from payments.api.schemas import VerifyPaymentRequest
from payments.api.views import payment_view
from payments.clients.port import OrderServiceError
from payments.gateway import get_gateway
from payments.gateway.port import PaymentGatewayError
from payments.payment.initiation import initiate_payment
from payments.payment.payment import Payment
from payments.payment.verification import RecordPaymentFailure, VerifyPayment, find_pending_payment

router = APIRouter(prefix="/api/payments", tags=["payments"])

buyer = authenticate(roles=("user",))


@router.post("/create/{order_id}", status_code=201)
async def create_payment(order_id: str, current_user: CurrentUser = Depends(buyer)):
    try:
        payment_id = await initiate_payment(order_id=order_id, user_id=current_user.id, token=current_user.token)
    except (OrderServiceError, PaymentGatewayError) as exc:
        return JSONResponse(status_code=500, content={"message": "Internal Server Error", "error": str(exc)})

    payment = current_domain.repository_for(Payment).get(payment_id)
    return {"message": "Payment initiated", "payment": payment_view(payment)}


@router.post("/verify")
async def verify_payment(body: VerifyPaymentRequest, current_user: CurrentUser = Depends(buyer)) -> dict:
    pending = find_pending_payment(body.razorpay_order_id)

    if not get_gateway().verify_payment_signature(body.razorpay_order_id, body.payment_id, body.signature):
        if pending is not None:
            current_domain.process(
                RecordPaymentFailure(
                    razorpay_order_id=body.razorpay_order_id,
                    reason="Invalid signature",
                    email=current_user.email,
                    username=current_user.username,
                ),
                asynchronous=False,
            )
        raise HTTPException(status_code=400, detail="Invalid signature")

    if pending is None:
        raise HTTPException(status_code=404, detail="Payment not found")

    payment_id = current_domain.process(
        VerifyPayment(
            razorpay_order_id=body.razorpay_order_id,
            payment_id=body.payment_id,
            signature=body.signature,
            email=current_user.email,
            username=current_user.username,
        ),
        asynchronous=False,
    )
    payment = current_domain.repository_for(Payment).get(payment_id)
    return {"message": "Payment verified", "payment": payment_view(payment)}
