"""Dashboard queries over the seller read models."""

from collections import defaultdict

from protean.utils.globals import current_domain

from seller_dashboard.projections.seller_order_line import SellerOrderLine
from seller_dashboard.projections.seller_product import SellerProduct

TOP_PRODUCTS = 5


def seller_lines(seller_id: str) -> list:
    return (
        current_domain.repository_for(SellerOrderLine)
        ._dao.query.filter(seller_id=str(seller_id))
        .order_by("-placed_at")
        .limit(None)
        .all()
        .items
    )


def _seller_products(seller_id: str, **filters) -> list:
    # limit(None) goes last: every other QuerySet call resets it to the default page size.
    return (
        current_domain.repository_for(SellerProduct)
        ._dao.query.filter(seller_id=str(seller_id), **filters)
        .order_by("-created_at")
        .limit(None)
        .all()
        .items
    )


def seller_products(seller_id: str) -> list:
    """The seller's listed products, newest first."""
    return _seller_products(seller_id, deleted=False)


def seller_metrics(seller_id: str) -> dict:
    """Units sold, revenue, distinct orders and best sellers, ignoring cancelled orders."""
    lines = [line for line in seller_lines(seller_id) if line.status != "CANCELLED"]

    sold = defaultdict(int)
    revenue = defaultdict(float)
    for line in lines:
        sold[str(line.product_id)] += line.quantity
        revenue[str(line.product_id)] += line.amount

    titles = {str(p.product_id): p.title for p in _seller_products(seller_id)}
    ranked = sorted(sold, key=lambda product_id: sold[product_id], reverse=True)[:TOP_PRODUCTS]

    return {
        "sales": sum(sold.values()),
        "revenue": sum(revenue.values()),
        "orders": len({str(line.order_id) for line in lines}),
        "topProducts": [
            {
                "productId": product_id,
                "title": titles.get(product_id),
                "sold": sold[product_id],
                "revenue": revenue[product_id],
            }
            for product_id in ranked
        ],
    }


def seller_orders(seller_id: str) -> list[dict]:
    """The seller's order lines grouped by order, newest order first."""
    orders: dict[str, dict] = {}
    for line in seller_lines(seller_id):
        order = orders.setdefault(
            str(line.order_id),
            {
                "orderId": str(line.order_id),
                "user": str(line.user_id),
                "status": line.status,
                "placedAt": line.placed_at,
                "items": [],
                "total": 0.0,
            },
        )
        order["items"].append(
            {
                "productId": str(line.product_id),
                "quantity": line.quantity,
                "price": {"amount": line.amount, "currency": line.currency},
            }
        )
        order["total"] += line.amount

    ordered = sorted(orders.values(), key=lambda o: o["placedAt"], reverse=True)
    for order in ordered:
        order["placedAt"] = order["placedAt"].isoformat() if order["placedAt"] else None
    return ordered
