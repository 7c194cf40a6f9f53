"""Cart management: commands and handler.

Every command is addressed by user id; the user's cart is created on first
use so callers never need to know the cart id.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from cart.cart.cart import Cart
from cart.domain import cart


@cart.command(part_of="Cart")
class OpenCart:
    user_id = Identifier(required=True)


@cart.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@cart.command(part_of="Cart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@cart.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@cart.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


def find_cart(user_id):
    """Return the user's cart, or None if they never opened one."""
    carts = current_domain.repository_for(Cart)._dao.query.filter(user_id=str(user_id)).all().items
    return carts[0] if carts else None


def _cart_for(user_id):
    return find_cart(user_id) or Cart.create(user_id=user_id)


def _existing_cart(user_id):
    shopping_cart = find_cart(user_id)
    if shopping_cart is None:
        raise ValidationError({"cart": ["Cart not found"]})
    return shopping_cart


@cart.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(OpenCart)
    def open_cart(self, command):
        shopping_cart = find_cart(command.user_id)
        if shopping_cart is None:
            shopping_cart = Cart.create(user_id=command.user_id)
            current_domain.repository_for(Cart).add(shopping_cart)
        return str(shopping_cart.id)

    @handle(AddToCart)
    def add_to_cart(self, command):
        shopping_cart = _cart_for(command.user_id)
        shopping_cart.add_item(product_id=command.product_id, quantity=command.quantity)
        current_domain.repository_for(Cart).add(shopping_cart)
        return str(shopping_cart.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        shopping_cart = _existing_cart(command.user_id)
        shopping_cart.update_item_quantity(product_id=command.product_id, quantity=command.quantity)
        current_domain.repository_for(Cart).add(shopping_cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        shopping_cart = _existing_cart(command.user_id)
        shopping_cart.remove_item(product_id=command.product_id)
        current_domain.repository_for(Cart).add(shopping_cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        shopping_cart = find_cart(command.user_id)
        if shopping_cart is None:
            return
        shopping_cart.clear()
        current_domain.repository_for(Cart).add(shopping_cart)
