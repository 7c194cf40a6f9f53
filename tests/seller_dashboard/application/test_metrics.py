"""Application tests for the dashboard queries over the seller read models."""

from datetime import UTC, datetime, timedelta

from protean import current_domain
from seller_dashboard.metrics import TOP_PRODUCTS, seller_metrics, seller_orders, seller_products
from seller_dashboard.projections.seller_order_line import SellerOrderLine, line_id
from seller_dashboard.projections.seller_product import SellerProduct

NOW = datetime(2026, 10, 1, 10, 0, tzinfo=UTC)


def _product(product_id, title, seller_id="seller-1", created_at=NOW, deleted=False):
    current_domain.repository_for(SellerProduct).add(
        SellerProduct(
            product_id=product_id,
            seller_id=seller_id,
            title=title,
            price_amount=100.0,
            stock=10,
            deleted=deleted,
            created_at=created_at,
            updated_at=created_at,
        )
    )


def _line(order_id, product_id, quantity, amount, seller_id="seller-1", status="PENDING", placed_at=NOW):
    current_domain.repository_for(SellerOrderLine).add(
        SellerOrderLine(
            line_id=line_id(order_id, product_id),
            seller_id=seller_id,
            order_id=order_id,
            user_id="user-1",
            product_id=product_id,
            quantity=quantity,
            amount=amount,
            status=status,
            placed_at=placed_at,
            updated_at=placed_at,
        )
    )


class TestSellerMetrics:
    def test_empty_dashboard(self):
        assert seller_metrics("seller-1") == {"sales": 0, "revenue": 0, "orders": 0, "topProducts": []}

    def test_totals_ignore_cancelled_orders(self):
        _product("prod-001", "Saree")
        _line("ord-001", "prod-001", 2, 200.0)
        _line("ord-002", "prod-001", 1, 100.0)
        _line("ord-003", "prod-001", 5, 500.0, status="CANCELLED")

        metrics = seller_metrics("seller-1")
        assert metrics["sales"] == 3
        assert metrics["revenue"] == 300.0
        assert metrics["orders"] == 2

    def test_other_sellers_are_excluded(self):
        _product("prod-001", "Saree")
        _product("prod-002", "Lamp", seller_id="seller-2")
        _line("ord-001", "prod-001", 1, 100.0)
        _line("ord-001", "prod-002", 4, 400.0, seller_id="seller-2")

        assert seller_metrics("seller-1")["sales"] == 1
        assert seller_metrics("seller-2")["sales"] == 4

    def test_top_products_ranked_by_units_sold(self):
        for index in range(TOP_PRODUCTS + 1):
            product_id = f"prod-{index}"
            _product(product_id, f"Product {index}")
            _line(f"ord-{index}", product_id, index + 1, 10.0 * (index + 1))

        top = seller_metrics("seller-1")["topProducts"]
        assert len(top) == TOP_PRODUCTS
        assert top[0] == {"productId": f"prod-{TOP_PRODUCTS}", "title": f"Product {TOP_PRODUCTS}", "sold": 6, "revenue": 60.0}
        assert "prod-0" not in {entry["productId"] for entry in top}


class TestSellerOrders:
    def test_lines_grouped_by_order_newest_first(self):
        _line("ord-old", "prod-001", 1, 100.0, placed_at=NOW - timedelta(days=1))
        _line("ord-new", "prod-001", 2, 200.0)
        _line("ord-new", "prod-002", 1, 50.0)

        orders = seller_orders("seller-1")
        assert [o["orderId"] for o in orders] == ["ord-new", "ord-old"]
        assert len(orders[0]["items"]) == 2
        assert orders[0]["total"] == 250.0
        assert orders[0]["placedAt"] == NOW.isoformat()


class TestSellerProducts:
    def test_deleted_products_are_hidden(self):
        _product("prod-001", "Saree")
        _product("prod-002", "Lamp", deleted=True)
        assert [p.product_id for p in seller_products("seller-1")] == ["prod-001"]

    def test_newest_first(self):
        _product("prod-001", "Saree", created_at=NOW - timedelta(days=2))
        _product("prod-002", "Lamp", created_at=NOW)
        assert [p.product_id for p in seller_products("seller-1")] == ["prod-002", "prod-001"]


class TestLargeSellers:
    """Sellers with more rows than the repository's default page of 100."""

    def test_metrics_count_every_line(self):
        _product("prod-001", "Saree")
        for n in range(150):
            _line(f"ord-{n:03d}", "prod-001", 1, 10.0, placed_at=NOW + timedelta(minutes=n))

        metrics = seller_metrics("seller-1")
        assert metrics["sales"] == 150
        assert metrics["orders"] == 150
        assert metrics["revenue"] == 1500.0
        assert len(seller_orders("seller-1")) == 150

    def test_every_product_is_listed(self):
        for n in range(130):
            _product(f"prod-{n:03d}", f"Product {n}", created_at=NOW + timedelta(minutes=n))

        products = seller_products("seller-1")
        assert len(products) == 130
        assert products[0].product_id == "prod-129"
