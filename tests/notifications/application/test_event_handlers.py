"""Application tests for the Auth and Payments cross-domain event handlers."""

from datetime import UTC, datetime

from notifications.channel import get_channel
from notifications.notification.auth_events import AuthEventsHandler
from notifications.notification.notification import (
    Notification,
    NotificationChannel,
    NotificationStatus,
    NotificationType,
)
from notifications.notification.payment_events import PaymentEventsHandler
from protean import current_domain
from shared.events.auth import UserRegistered
from shared.events.payments import PaymentCompleted, PaymentFailed


def _notifications_for(recipient_id, notification_type):
    return (
        current_domain.repository_for(Notification)
        ._dao.query.filter(recipient_id=recipient_id, notification_type=notification_type)
        .all()
        .items
    )


class TestUserRegisteredHandler:
    def test_welcome_email_is_sent(self):
        event = UserRegistered(
            user_id="user-1",
            username="asha",
            email="asha@example.com",
            first_name="Asha",
            last_name="Rao",
            role="user",
            registered_at=datetime.now(UTC),
        )
        AuthEventsHandler().on_user_registered(event)

        notifications = _notifications_for("user-1", NotificationType.WELCOME.value)
        assert len(notifications) == 1
        assert notifications[0].status == NotificationStatus.SENT.value
        assert notifications[0].source_event_type == "Auth.UserRegistered.v1"

        outbox = get_channel(NotificationChannel.EMAIL.value).messages_to("asha@example.com")
        assert outbox[0]["subject"] == "Welcome to Our Service."


class TestPaymentEventsHandler:
    def test_payment_completed_email(self):
        event = PaymentCompleted(
            payment_id="pay-001",
            order_id="ord-001",
            user_id="user-1",
            email="asha@example.com",
            username="asha",
            gateway_payment_id="pay_xyz",
            amount=4998.0,
            currency="INR",
            completed_at=datetime.now(UTC),
        )
        PaymentEventsHandler().on_payment_completed(event)

        notifications = _notifications_for("user-1", NotificationType.PAYMENT_COMPLETED.value)
        assert len(notifications) == 1
        assert notifications[0].subject == "Payment Successful"

    def test_payment_failed_email(self):
        event = PaymentFailed(
            payment_id="pay-002",
            order_id="ord-002",
            user_id="user-1",
            email="asha@example.com",
            username="asha",
            reason="Invalid signature",
            failed_at=datetime.now(UTC),
        )
        PaymentEventsHandler().on_payment_failed(event)

        notifications = _notifications_for("user-1", NotificationType.PAYMENT_FAILED.value)
        assert len(notifications) == 1
        assert notifications[0].subject == "Payment Failed"

    def test_skips_when_no_email(self):
        event = PaymentFailed(
            payment_id="pay-003",
            order_id="ord-003",
            user_id="user-9",
            reason="Invalid signature",
            failed_at=datetime.now(UTC),
        )
        PaymentEventsHandler().on_payment_failed(event)
        assert _notifications_for("user-9", NotificationType.PAYMENT_FAILED.value) == []
