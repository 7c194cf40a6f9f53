"""Read-side order lookups."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order

DEFAULT_PAGE_SIZE = 10


def get_order(order_id: str):
    """Return the order with this id, or None."""
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return None


def orders_for_user(user_id: str, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> tuple[list, int]:
    """Return one newest-first page of the user's orders and their total count."""
    page = max(page or 1, 1)
    limit = max(limit or DEFAULT_PAGE_SIZE, 1)

    result = (
        current_domain.repository_for(Order)
        ._dao.query.filter(user_id=str(user_id))
        .order_by("-created_at")
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return result.items, result.total
