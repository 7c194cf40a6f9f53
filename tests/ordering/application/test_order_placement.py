"""Application tests for order placement from the caller's cart."""

import asyncio
import json

import pytest
from ordering.clients import set_cart_client, set_product_catalog
from ordering.clients.fake_adapter import FakeCartClient, FakeProductCatalog
from ordering.order.order import Order, OrderStatus
from ordering.order.placement import (
    OrderPlacementError,
    PlaceOrder,
    UpstreamServiceError,
    place_order,
    price_cart,
)
from protean import current_domain

ADDRESS = {"street": "12 MG Road", "city": "Bengaluru", "state": "KA", "country": "India", "pincode": "560001"}
TOKEN = "token-user-1"


@pytest.fixture()
def cart_client():
    client = FakeCartClient()
    set_cart_client(client)
    return client


@pytest.fixture()
def catalog():
    fake = FakeProductCatalog()
    fake.add_product("prod-001", "Handloom Saree", price_amount=2499.0, stock=5)
    fake.add_product("prod-002", "Clay Mug", price_amount=300.0, stock=1)
    set_product_catalog(fake)
    return fake


class TestPlaceOrderCommand:
    def test_order_is_persisted(self):
        order_id = current_domain.process(
            PlaceOrder(
                user_id="user-1",
                items=json.dumps([{"product_id": "prod-001", "quantity": 1, "amount": 10.0, "currency": "INR"}]),
                shipping_address=json.dumps(ADDRESS),
            ),
            asynchronous=False,
        )
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PENDING.value
        assert len(order.items) == 1

    def test_order_placed_is_stored(self):
        current_domain.process(
            PlaceOrder(
                user_id="user-1",
                items=json.dumps([{"product_id": "prod-001", "quantity": 1, "amount": 10.0, "currency": "INR"}]),
                shipping_address=json.dumps(ADDRESS),
            ),
            asynchronous=False,
        )
        messages = current_domain.event_store.store.read("ordering::order")
        placed = [
            m
            for m in messages
            if m.metadata and m.metadata.headers and m.metadata.headers.type == "Ordering.OrderPlaced.v1"
        ]
        assert len(placed) >= 1


class TestPriceCart:
    def test_lines_are_priced_by_quantity(self, cart_client, catalog):
        cart_client.set_cart(TOKEN, [("prod-001", 2), ("prod-002", 1)])
        lines = asyncio.run(price_cart(TOKEN))
        assert lines == [
            {"product_id": "prod-001", "quantity": 2, "amount": 4998.0, "currency": "INR"},
            {"product_id": "prod-002", "quantity": 1, "amount": 300.0, "currency": "INR"},
        ]

    def test_cart_is_read_with_callers_token(self, cart_client, catalog):
        cart_client.set_cart(TOKEN, [("prod-001", 1)])
        asyncio.run(price_cart(TOKEN))
        assert cart_client.calls == [TOKEN]

    def test_empty_cart_is_rejected(self, cart_client, catalog):
        with pytest.raises(OrderPlacementError, match="Cart is empty"):
            asyncio.run(price_cart(TOKEN))

    def test_short_stock_is_rejected(self, cart_client, catalog):
        cart_client.set_cart(TOKEN, [("prod-002", 2)])
        with pytest.raises(OrderPlacementError, match="Product Clay Mug is out of stock"):
            asyncio.run(price_cart(TOKEN))

    def test_unknown_product_is_upstream_error(self, cart_client, catalog):
        cart_client.set_cart(TOKEN, [("prod-404", 1)])
        with pytest.raises(UpstreamServiceError):
            asyncio.run(price_cart(TOKEN))

    def test_cart_service_failure(self, cart_client, catalog):
        cart_client.fail_with("connect ECONNREFUSED")
        with pytest.raises(UpstreamServiceError, match="ECONNREFUSED"):
            asyncio.run(price_cart(TOKEN))


class TestPlaceOrder:
    def test_places_order_for_the_whole_cart(self, cart_client, catalog):
        cart_client.set_cart(TOKEN, [("prod-001", 2), ("prod-002", 1)])
        order_id = asyncio.run(place_order("user-1", TOKEN, ADDRESS))

        order = current_domain.repository_for(Order).get(order_id)
        assert str(order.user_id) == "user-1"
        assert order.total_price.amount == 5298.0
        assert order.shipping_address.city == "Bengaluru"

    def test_nothing_is_stored_when_stock_is_short(self, cart_client, catalog):
        cart_client.set_cart(TOKEN, [("prod-002", 5)])
        with pytest.raises(OrderPlacementError):
            asyncio.run(place_order("user-1", TOKEN, ADDRESS))
        assert current_domain.repository_for(Order)._dao.query.all().items == []
