"""Tests for the Cart aggregate."""

import pytest
from cart.cart.cart import Cart
from cart.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from protean.exceptions import ValidationError

PRODUCT_A = "3f6c1a52-8c8e-4b8a-9a51-2f0b8f0f8a11"
PRODUCT_B = "9b2d7c10-1e5f-4c2a-8d3b-6a7e9f0c1d22"


@pytest.fixture()
def cart():
    return Cart.create(user_id="user-1")


class TestCartCreation:
    def test_new_cart_is_empty(self, cart):
        assert cart.items == []
        assert cart.total_quantity == 0

    def test_timestamps_are_set(self, cart):
        assert cart.created_at is not None
        assert cart.updated_at is not None


class TestAddItem:
    def test_adds_new_line(self, cart):
        cart.add_item(PRODUCT_A, 2)
        assert len(cart.items) == 1
        assert cart.find_item(PRODUCT_A).quantity == 2

    def test_same_product_increases_quantity(self, cart):
        cart.add_item(PRODUCT_A, 2)
        cart.add_item(PRODUCT_A, 3)
        assert len(cart.items) == 1
        assert cart.find_item(PRODUCT_A).quantity == 5

    def test_total_quantity_spans_lines(self, cart):
        cart.add_item(PRODUCT_A, 2)
        cart.add_item(PRODUCT_B, 1)
        assert cart.total_quantity == 3

    def test_zero_quantity_is_rejected(self, cart):
        with pytest.raises(ValidationError):
            cart.add_item(PRODUCT_A, 0)

    def test_raises_cart_item_added(self, cart):
        cart.add_item(PRODUCT_A, 2)
        event = cart._events[-1]
        assert isinstance(event, CartItemAdded)
        assert event.quantity == 2


class TestUpdateQuantity:
    def test_sets_quantity(self, cart):
        cart.add_item(PRODUCT_A, 2)
        cart.update_item_quantity(PRODUCT_A, 7)
        assert cart.find_item(PRODUCT_A).quantity == 7

    def test_raises_quantity_updated(self, cart):
        cart.add_item(PRODUCT_A, 2)
        cart.update_item_quantity(PRODUCT_A, 7)
        event = cart._events[-1]
        assert isinstance(event, CartQuantityUpdated)
        assert event.previous_quantity == 2
        assert event.new_quantity == 7

    def test_unknown_product_is_rejected(self, cart):
        with pytest.raises(ValidationError) as exc:
            cart.update_item_quantity(PRODUCT_A, 1)
        assert exc.value.messages["product_id"] == ["Product not found in cart"]


class TestRemoveAndClear:
    def test_remove_item(self, cart):
        cart.add_item(PRODUCT_A, 2)
        cart.add_item(PRODUCT_B, 1)
        cart.remove_item(PRODUCT_A)
        assert [str(i.product_id) for i in cart.items] == [PRODUCT_B]
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_remove_unknown_is_rejected(self, cart):
        with pytest.raises(ValidationError):
            cart.remove_item(PRODUCT_A)

    def test_clear_empties_the_cart(self, cart):
        cart.add_item(PRODUCT_A, 2)
        cart.add_item(PRODUCT_B, 1)
        cart.clear()
        assert cart.items == []
        assert isinstance(cart._events[-1], CartCleared)
