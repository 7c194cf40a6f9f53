"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.product.events import ProductCreated, ProductDeleted, ProductUpdated
from catalogue.product.product import Product
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_PRODUCT_EVENT_CLASSES = {
    "ProductCreated": ProductCreated,
    "ProductUpdated": ProductUpdated,
    "ProductDeleted": ProductDeleted,
}


def _listed_product(amount=2499.0, currency="INR"):
    product = Product.create(seller_id="seller-1", title="Handloom Saree", price_amount=amount, price_currency=currency)
    product._events.clear()
    return product


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("a listed product priced {amount:g} {currency}"), target_fixture="product")
def listed_product(amount, currency):
    return _listed_product(amount=amount, currency=currency)


@given("a deleted product", target_fixture="product")
def deleted_product():
    product = _listed_product()
    product.delete()
    product._events.clear()
    return product


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the product status is "{status}"'))
def product_status_is(product, status):
    assert product.status == status


@then(parsers.cfparse('the product title is "{title}"'))
def product_title_is(product, title):
    assert product.title == title


@then(parsers.cfparse("the product price is {amount:g} {currency}"))
def product_price_is(product, amount, currency):
    assert product.price.amount == amount
    assert product.price.currency == currency


@then(parsers.cfparse("a {event_type} product event is raised"))
def product_event_raised(product, event_type):
    event_cls = _PRODUCT_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in product._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in product._events]}"
