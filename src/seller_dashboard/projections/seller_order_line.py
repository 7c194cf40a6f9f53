"""Seller order lines: one row per (order, product) for the product's seller."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from seller_dashboard.domain import seller_dashboard


def line_id(order_id, product_id) -> str:
    return f"{order_id}:{product_id}"


@seller_dashboard.projection
class SellerOrderLine:
    line_id = String(identifier=True, required=True, max_length=100)
    seller_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=0)
    amount = Float(default=0.0)
    currency = String(max_length=3, default="INR")
    status = String(max_length=20, default="PENDING")
    placed_at = DateTime()
    updated_at = DateTime()
