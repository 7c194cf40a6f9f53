"""Ports for the services order placement reads from.

The caller's cart and the product details live in other contexts; both are
read with the caller's own token so the upstream service applies its own
authorisation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductSnapshot:
    """The fields of a product that pricing and stock checks need."""

    product_id: str
    title: str
    stock: int
    price_amount: float
    price_currency: str


class UpstreamServiceError(Exception):
    """Raised when a cart or product request fails or cannot be made."""


class CartClient(ABC):
    @abstractmethod
    async def get_cart(self, token: str) -> list[CartLine]:
        """Return the lines of the cart that belongs to the token's user."""
        ...


class ProductCatalog(ABC):
    @abstractmethod
    async def get_product(self, product_id: str, token: str) -> ProductSnapshot:
        ...
