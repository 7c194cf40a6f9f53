"""Buyer-side order changes: cancellation and shipping address updates."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reason = String(max_length=500)


@ordering.command(part_of="Order")
class UpdateOrderAddress:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: address dict


def _owned_order(order_id, user_id):
    order = current_domain.repository_for(Order).get(order_id)
    if not order.is_owned_by(user_id):
        raise ValidationError({"order_id": ["Forbidden: You do not have access to this order"]})
    return order


@ordering.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        order = _owned_order(command.order_id, command.user_id)
        order.cancel(reason=command.reason)
        current_domain.repository_for(Order).add(order)

    @handle(UpdateOrderAddress)
    def update_order_address(self, command):
        order = _owned_order(command.order_id, command.user_id)
        order.update_address(json.loads(command.shipping_address))
        current_domain.repository_for(Order).add(order)
