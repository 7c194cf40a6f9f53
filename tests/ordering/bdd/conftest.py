"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.events import (
    OrderAddressUpdated,
    OrderCancelled,
    OrderConfirmed,
    OrderDelivered,
    OrderPlaced,
    OrderShipped,
)
from ordering.order.order import Order
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_ORDER_EVENT_CLASSES = {
    "OrderPlaced": OrderPlaced,
    "OrderCancelled": OrderCancelled,
    "OrderAddressUpdated": OrderAddressUpdated,
    "OrderConfirmed": OrderConfirmed,
    "OrderShipped": OrderShipped,
    "OrderDelivered": OrderDelivered,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def shipping_address():
    return {"street": "12 MG Road", "city": "Bengaluru", "state": "KA", "country": "India", "pincode": "560001"}


def _pending_order(shipping_address):
    order = Order.place(
        user_id="user-1",
        lines=[{"product_id": "prod-001", "quantity": 1, "amount": 100.0, "currency": "INR"}],
        shipping_address=shipping_address,
    )
    order._events.clear()
    return order


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a pending order", target_fixture="order")
def pending_order(shipping_address):
    return _pending_order(shipping_address)


@given("a confirmed order", target_fixture="order")
def confirmed_order(shipping_address):
    order = _pending_order(shipping_address)
    order.confirm(payment_id="pay-001")
    order._events.clear()
    return order


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse("the order total is {amount:g}"))
def order_total_is(order, amount):
    assert order.total_price.amount == amount


@then(parsers.cfparse('the order ships to "{city}"'))
def order_ships_to(order, city):
    assert order.shipping_address.city == city


@then(parsers.cfparse("a {event_type} order event is raised"))
def order_event_raised(order, event_type):
    event_cls = _ORDER_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in order._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in order._events]}"
