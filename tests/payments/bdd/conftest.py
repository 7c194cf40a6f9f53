"""Shared BDD fixtures and step definitions for the Payments domain."""

import pytest
from payments.payment.events import PaymentCompleted, PaymentFailed, PaymentInitiated
from payments.payment.payment import Payment
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_PAYMENT_EVENT_CLASSES = {
    "PaymentInitiated": PaymentInitiated,
    "PaymentCompleted": PaymentCompleted,
    "PaymentFailed": PaymentFailed,
}


def _pending_payment():
    payment = Payment.initiate(
        order_id="ord-001",
        user_id="user-1",
        razorpay_order_id="order_abc",
        amount=499800,
        currency="INR",
    )
    payment._events.clear()
    return payment


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
@given("a pending payment", target_fixture="payment")
def pending_payment():
    return _pending_payment()


@given("a completed payment", target_fixture="payment")
def completed_payment():
    payment = _pending_payment()
    payment.complete(gateway_payment_id="pay_xyz", signature="sig")
    payment._events.clear()
    return payment


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the payment status is "{status}"'))
def payment_status_is(payment, status):
    assert payment.status == status


@then(parsers.cfparse("the payment amount is {amount:d} paise"))
def payment_amount_is(payment, amount):
    assert payment.price.amount == amount


@then(parsers.cfparse("a {event_type} payment event is raised"))
def payment_event_raised(payment, event_type):
    event_cls = _PAYMENT_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in payment._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in payment._events]}"
