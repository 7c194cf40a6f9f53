"""JSON views of Cart aggregates."""


def cart_view(cart) -> dict:
    return {
        "_id": str(cart.id),
        "user": str(cart.user_id),
        "items": [{"productId": str(item.product_id), "quantity": item.quantity} for item in cart.items],
        "updatedAt": cart.updated_at.isoformat() if cart.updated_at else None,
    }


def totals_view(cart) -> dict:
    return {"itemCount": len(cart.items), "totalQuantity": cart.total_quantity}
