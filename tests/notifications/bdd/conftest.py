"""Shared BDD fixtures and step definitions for the Notifications domain."""

import pytest
from notifications.notification.notification import Notification, NotificationType
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _welcome():
    notification = Notification.create(
        recipient_id="user-1",
        recipient_email="asha@example.com",
        notification_type=NotificationType.WELCOME.value,
        subject="Welcome to Our Service.",
        body="Thanks for registering with us!",
    )
    notification._events.clear()
    return notification


@given("a pending welcome notification", target_fixture="notification")
def pending_notification():
    return _welcome()


@given("a sent welcome notification", target_fixture="notification")
def sent_notification():
    notification = _welcome()
    notification.mark_sent()
    notification._events.clear()
    return notification


@then(parsers.cfparse('the notification status is "{status}"'))
def notification_status_is(notification, status):
    assert notification.status == status


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)
