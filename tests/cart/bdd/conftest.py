"""Shared BDD fixtures and step definitions for the Cart domain."""

import pytest
from cart.cart.cart import Cart
from cart.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_CART_EVENT_CLASSES = {
    "CartItemAdded": CartItemAdded,
    "CartQuantityUpdated": CartQuantityUpdated,
    "CartItemRemoved": CartItemRemoved,
    "CartCleared": CartCleared,
}

# Scenario product labels mapped to product ids
PRODUCTS = {
    "A": "3f6c1a52-8c8e-4b8a-9a51-2f0b8f0f8a11",
    "B": "9b2d7c10-1e5f-4c2a-8d3b-6a7e9f0c1d22",
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    return PRODUCTS


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="cart")
def empty_cart():
    return Cart.create(user_id="user-1")


@given(parsers.cfparse('a cart holding {quantity:d} of product "{label}"'), target_fixture="cart")
def cart_holding(quantity, label):
    shopping_cart = Cart.create(user_id="user-1")
    shopping_cart.add_item(PRODUCTS[label], quantity)
    shopping_cart._events.clear()
    return shopping_cart


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(cart, count):
    assert len(cart.items) == count


@then(parsers.cfparse('the quantity of product "{label}" is {quantity:d}'))
def product_quantity_is(cart, label, quantity):
    assert cart.find_item(PRODUCTS[label]).quantity == quantity


@then(parsers.cfparse("a {event_type} cart event is raised"))
def cart_event_raised(cart, event_type):
    event_cls = _CART_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in cart._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in cart._events]}"
