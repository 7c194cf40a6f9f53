"""Cross-domain event contracts for Catalogue domain events.

Consumed by the Seller Dashboard domain to maintain its per-seller product
read model.

The source-of-truth events are in src/catalogue/product/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, Integer, String


class ProductCreated(BaseEvent):
    __version__ = 1

    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    title = String(required=True)
    price_amount = Float(required=True)
    price_currency = String(required=True)
    stock = Integer(default=0)
    image_count = Integer(default=0)
    created_at = DateTime(required=True)


class ProductUpdated(BaseEvent):
    __version__ = 1

    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    title = String(required=True)
    description = String()
    price_amount = Float(required=True)
    price_currency = String(required=True)
    stock = Integer(default=0)
    updated_at = DateTime(required=True)


class ProductDeleted(BaseEvent):
    __version__ = 1

    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    deleted_at = DateTime(required=True)
