"""Inbound cross-domain event handler: Notifications reacts to Auth events.

Listens for UserRegistered to send the welcome email.
"""

from notifications.domain import notifications
from notifications.notification.helpers import create_email_notification
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.auth import UserRegistered

notifications.register_external_event(UserRegistered, "Auth.UserRegistered.v1")


@notifications.event_handler(part_of=Notification, stream_category="auth::user")
class AuthEventsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        create_email_notification(
            recipient_id=str(event.user_id),
            recipient_email=event.email,
            notification_type=NotificationType.WELCOME.value,
            context={
                "first_name": event.first_name,
                "last_name": event.last_name,
                "username": event.username,
            },
            source_event_type="Auth.UserRegistered.v1",
        )
