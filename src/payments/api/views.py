"""JSON views of Payment aggregates."""


def payment_view(payment) -> dict:
    return {
        "_id": str(payment.id),
        "order": str(payment.order_id),
        "user": str(payment.user_id),
        "razorpayOrderId": payment.razorpay_order_id,
        "paymentId": payment.payment_id,
        "signature": payment.signature,
        "price": {"amount": payment.price.amount, "currency": payment.price.currency},
        "status": payment.status,
        "createdAt": payment.created_at.isoformat() if payment.created_at else None,
        "updatedAt": payment.updated_at.isoformat() if payment.updated_at else None,
    }
