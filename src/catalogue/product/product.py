"""Product aggregate root with Price value object and ProductImage entity."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from catalogue.domain import catalogue

MAX_IMAGES = 5

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Currency(Enum):
    USD = "USD"
    INR = "INR"


class ProductStatus(Enum):
    ACTIVE = "Active"
    DELETED = "Deleted"


@catalogue.value_object(part_of="Product")
class Price:
    """Unit price of a product."""

    amount: Float(required=True)
    currency: String(choices=Currency, default=Currency.INR.value)

    @invariant.post
    def amount_must_be_positive(self):
        if self.amount is not None and self.amount <= 0:
            raise ValidationError({"amount": ["Price amount must be greater than 0"]})


@catalogue.entity(part_of="Product")
class ProductImage:
    url: String(required=True, max_length=1000)
    thumbnail: String(max_length=1000)
    file_id: String(max_length=255)


@catalogue.aggregate
class Product:
    """A sellable item owned by one seller.

    Deleting a product retires it rather than erasing it, so the deletion can
    still be announced to read models downstream.
    """

    title: String(required=True, max_length=200)
    description: String(max_length=500)
    price: ValueObject(Price, required=True)
    stock: Integer(default=0, min_value=0)
    seller_id: Identifier(required=True)
    images: HasMany(ProductImage)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def images_cannot_exceed_maximum(self):
        if len(self.images) > MAX_IMAGES:
            raise ValidationError({"images": [f"A product can have at most {MAX_IMAGES} images"]})

    @property
    def is_deleted(self) -> bool:
        return self.status == ProductStatus.DELETED.value

    def is_owned_by(self, seller_id) -> bool:
        return str(self.seller_id) == str(seller_id)

    @classmethod
    def create(cls, seller_id, title, price_amount, price_currency=None, description=None, stock=0, images=None):
        from catalogue.product.events import ProductCreated

        now = datetime.now(UTC)
        product = cls(
            seller_id=seller_id,
            title=title,
            description=description,
            price=Price(amount=price_amount, currency=price_currency or Currency.INR.value),
            stock=stock or 0,
            status=ProductStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        for image in images or []:
            product.add_images(
                ProductImage(url=image["url"], thumbnail=image.get("thumbnail"), file_id=image.get("id"))
            )

        product.raise_(
            ProductCreated(
                product_id=product.id,
                seller_id=str(seller_id),
                title=title,
                price_amount=product.price.amount,
                price_currency=product.price.currency,
                stock=product.stock,
                image_count=len(product.images),
                created_at=now,
            )
        )
        return product

    def update(self, title=_UNSET, description=_UNSET, price_amount=_UNSET, price_currency=_UNSET, stock=_UNSET):
        """Apply a partial update; only the arguments passed are changed."""
        from catalogue.product.events import ProductUpdated

        if self.is_deleted:
            raise ValidationError({"status": ["Deleted products cannot be updated"]})

        if title is not _UNSET:
            self.title = title
        if description is not _UNSET:
            self.description = description
        if price_amount is not _UNSET or price_currency is not _UNSET:
            self.price = Price(
                amount=price_amount if price_amount is not _UNSET else self.price.amount,
                currency=price_currency if price_currency is not _UNSET else self.price.currency,
            )
        if stock is not _UNSET:
            self.stock = stock

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            ProductUpdated(
                product_id=self.id,
                seller_id=str(self.seller_id),
                title=self.title,
                description=self.description,
                price_amount=self.price.amount,
                price_currency=self.price.currency,
                stock=self.stock,
                updated_at=now,
            )
        )

    def delete(self):
        from catalogue.product.events import ProductDeleted

        if self.is_deleted:
            raise ValidationError({"status": ["Product is already deleted"]})

        now = datetime.now(UTC)
        self.status = ProductStatus.DELETED.value
        self.updated_at = now
        self.raise_(
            ProductDeleted(
                product_id=self.id,
                seller_id=str(self.seller_id),
                deleted_at=now,
            )
        )
