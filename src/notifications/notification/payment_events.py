"""Inbound cross-domain event handler: Notifications reacts to Payments events.

Both outcomes of a payment verification are emailed to the buyer.
"""

from notifications.domain import notifications
from notifications.notification.helpers import create_email_notification
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.payments import PaymentCompleted, PaymentFailed

notifications.register_external_event(PaymentCompleted, "Payments.PaymentCompleted.v1")
notifications.register_external_event(PaymentFailed, "Payments.PaymentFailed.v1")


@notifications.event_handler(part_of=Notification, stream_category="payments::payment")
class PaymentEventsHandler:
    @handle(PaymentCompleted)
    def on_payment_completed(self, event: PaymentCompleted) -> None:
        create_email_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.email,
            notification_type=NotificationType.PAYMENT_COMPLETED.value,
            context={
                "username": event.username,
                "order_id": str(event.order_id),
                "amount": event.amount,
                "currency": event.currency,
            },
            source_event_type="Payments.PaymentCompleted.v1",
        )

    @handle(PaymentFailed)
    def on_payment_failed(self, event: PaymentFailed) -> None:
        create_email_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.email,
            notification_type=NotificationType.PAYMENT_FAILED.value,
            context={
                "username": event.username,
                "order_id": str(event.order_id),
                "reason": event.reason,
            },
            source_event_type="Payments.PaymentFailed.v1",
        )
