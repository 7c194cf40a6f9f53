"""Order placement: turn the caller's cart into a PENDING order.

The cart and product details are fetched from their services with the
caller's token; stock is checked and line prices are fixed here, then the
PlaceOrder command persists the order.
"""

import asyncio
import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from ordering.clients import get_cart_client, get_product_catalog
from ordering.clients.port import UpstreamServiceError
from ordering.domain import logger, ordering
from ordering.order.order import Order

__all__ = ["OrderPlacementError", "PlaceOrder", "UpstreamServiceError", "place_order"]


class OrderPlacementError(Exception):
    """The cart cannot be turned into an order (empty, or short of stock)."""


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, amount, currency}
    shipping_address = Text(required=True)  # JSON: address dict


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            user_id=command.user_id,
            lines=json.loads(command.items),
            shipping_address=json.loads(command.shipping_address),
        )
        current_domain.repository_for(Order).add(order)
        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total=order.total_price.amount,
        )
        return str(order.id)


async def price_cart(token: str) -> list[dict]:
    """Fetch the caller's cart and price every line against the catalogue."""
    lines = await get_cart_client().get_cart(token)
    if not lines:
        raise OrderPlacementError("Cart is empty")

    catalog = get_product_catalog()
    products = await asyncio.gather(*(catalog.get_product(line.product_id, token) for line in lines))

    priced = []
    for line, product in zip(lines, products, strict=True):
        if product.stock < line.quantity:
            raise OrderPlacementError(f"Product {product.title} is out of stock")
        priced.append(
            {
                "product_id": line.product_id,
                "quantity": line.quantity,
                "amount": product.price_amount * line.quantity,
                "currency": product.price_currency,
            }
        )
    return priced


async def place_order(user_id: str, token: str, shipping_address: dict) -> str:
    """Place an order for everything in the caller's cart and return its id.

    Raises:
        OrderPlacementError: the cart is empty or a product lacks stock.
        UpstreamServiceError: the cart or catalogue could not be read.
    """
    lines = await price_cart(token)
    return current_domain.process(
        PlaceOrder(
            user_id=user_id,
            items=json.dumps(lines),
            shipping_address=json.dumps(shipping_address),
        ),
        asynchronous=False,
    )
