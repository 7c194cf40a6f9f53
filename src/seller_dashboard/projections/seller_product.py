"""Seller products: the catalogue as each seller sees it.

Also the lookup that attributes order lines to sellers, since order events
only carry product ids.
"""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from seller_dashboard.domain import seller_dashboard


@seller_dashboard.projection
class SellerProduct:
    product_id = Identifier(identifier=True, required=True)
    seller_id = Identifier(required=True)
    title = String(required=True, max_length=200)
    price_amount = Float(default=0.0)
    price_currency = String(max_length=3, default="INR")
    stock = Integer(default=0)
    deleted = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()
