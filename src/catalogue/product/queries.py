"""Read-side product lookups: search, seller listings and single fetch."""

from uuid import UUID

from protean import Q
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.product.product import Product, ProductStatus

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 20


def is_valid_product_id(value: str) -> bool:
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def get_product(product_id: str):
    """Return the active product with this id, or None."""
    try:
        product = current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None
    return None if product.is_deleted else product


def _active_products(*conditions, **filters):
    """Newest-first query over products that have not been deleted."""
    return (
        current_domain.repository_for(Product)
        ._dao.query.filter(*conditions, status=ProductStatus.ACTIVE.value, **filters)
        .order_by("-created_at")
    )


def _page(query, skip: int, limit: int) -> list:
    skip = max(skip or 0, 0)
    limit = min(max(limit or DEFAULT_PAGE_SIZE, 1), MAX_PAGE_SIZE)
    return query.offset(skip).limit(limit).all().items


def search_products(
    q: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    skip: int = 0,
    limit: int = DEFAULT_PAGE_SIZE,
) -> list:
    """Newest-first product search.

    `q` matches title or description case-insensitively; price bounds are
    inclusive and compare against the unit price amount.
    """
    conditions = []
    filters = {}
    if q and q.strip():
        needle = q.strip()
        conditions.append(Q(title__icontains=needle) | Q(description__icontains=needle))
    if min_price is not None:
        filters["price_amount__gte"] = min_price
    if max_price is not None:
        filters["price_amount__lte"] = max_price

    return _page(_active_products(*conditions, **filters), skip, limit)


def products_for_seller(seller_id: str, skip: int = 0, limit: int = DEFAULT_PAGE_SIZE) -> list:
    return _page(_active_products(seller_id=seller_id), skip, limit)
