"""JSON views of Order aggregates."""


def _money(money) -> dict:
    return {"amount": money.amount, "currency": money.currency}


def order_view(order) -> dict:
    return {
        "_id": str(order.id),
        "user": str(order.user_id),
        "items": [
            {"product": str(item.product_id), "quantity": item.quantity, "price": _money(item.price)}
            for item in order.items
        ],
        "status": order.status,
        "totalPrice": _money(order.total_price),
        "shippingAddress": order.shipping_address.to_dict(),
        "cancellationReason": order.cancellation_reason,
        "createdAt": order.created_at.isoformat() if order.created_at else None,
        "updatedAt": order.updated_at.isoformat() if order.updated_at else None,
    }
