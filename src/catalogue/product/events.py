"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A seller listed a new product."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    title: String(required=True)
    price_amount: Float(required=True)
    price_currency: String(required=True)
    stock: Integer(default=0)
    image_count: Integer(default=0)
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """Title, description, price or stock of a product changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    title: String(required=True)
    description: String()
    price_amount: Float(required=True)
    price_currency: String(required=True)
    stock: Integer(default=0)
    updated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductDeleted:
    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
