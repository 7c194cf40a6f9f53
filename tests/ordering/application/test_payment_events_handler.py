"""Application tests for the Payments event handler in Ordering."""

import json
from datetime import UTC, datetime

from ordering.order.management import CancelOrder
from ordering.order.order import OrderStatus
from ordering.order.payment_events import PaymentOrderEventHandler
from ordering.order.placement import PlaceOrder
from ordering.order.queries import get_order
from protean import current_domain
from shared.events.payments import PaymentCompleted

ADDRESS = {"street": "12 MG Road", "city": "Bengaluru", "state": "KA", "country": "India", "pincode": "560001"}


def _place():
    return current_domain.process(
        PlaceOrder(
            user_id="user-1",
            items=json.dumps([{"product_id": "prod-001", "quantity": 1, "amount": 100.0, "currency": "INR"}]),
            shipping_address=json.dumps(ADDRESS),
        ),
        asynchronous=False,
    )


def _payment_completed(order_id):
    return PaymentCompleted(
        payment_id="pay-001",
        order_id=order_id,
        user_id="user-1",
        email="asha@example.com",
        username="asha",
        gateway_payment_id="pay_gw_001",
        amount=100.0,
        currency="INR",
        completed_at=datetime.now(UTC),
    )


class TestPaymentCompletedHandler:
    def test_pending_order_is_confirmed(self):
        order_id = _place()
        PaymentOrderEventHandler().on_payment_completed(_payment_completed(order_id))

        order = get_order(order_id)
        assert order.status == OrderStatus.CONFIRMED.value
        assert order.payment_id == "pay-001"

    def test_cancelled_order_is_left_alone(self):
        order_id = _place()
        current_domain.process(CancelOrder(order_id=order_id, user_id="user-1"), asynchronous=False)

        PaymentOrderEventHandler().on_payment_completed(_payment_completed(order_id))
        assert get_order(order_id).status == OrderStatus.CANCELLED.value

    def test_unknown_order_is_ignored(self):
        PaymentOrderEventHandler().on_payment_completed(_payment_completed("missing-order"))
        # Should not raise; the event is logged and skipped
