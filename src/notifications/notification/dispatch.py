"""Internal dispatch handler: sends notifications via the channel adapter.

Reacts to NotificationCreated and marks the notification SENT or FAILED.
Delivery problems are recorded on the notification, never raised.
"""

import structlog
from notifications.channel import get_channel
from notifications.domain import notifications
from notifications.notification.events import NotificationCreated
from notifications.notification.notification import Notification, NotificationStatus
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

logger = structlog.get_logger(__name__)


@notifications.event_handler(part_of=Notification)
class NotificationDispatcher:
    @handle(NotificationCreated)
    def on_notification_created(self, event: NotificationCreated) -> None:
        repo = current_domain.repository_for(Notification)

        try:
            notification = repo.get(event.notification_id)
        except ObjectNotFoundError:
            logger.error("Failed to load notification for dispatch", notification_id=str(event.notification_id))
            return

        if NotificationStatus(notification.status) != NotificationStatus.PENDING:
            logger.info(
                "Notification not in PENDING status, skipping dispatch",
                notification_id=str(notification.id),
                status=notification.status,
            )
            return

        try:
            result = get_channel(notification.channel).send(
                to=notification.recipient_email,
                subject=notification.subject or "",
                body=notification.body,
                html_body=notification.html_body,
            )
        except Exception as exc:
            result = {"status": "failed", "error": str(exc)}

        if result.get("status") == "sent":
            notification.mark_sent()
            logger.info("Notification sent", notification_id=str(notification.id), to=notification.recipient_email)
        else:
            notification.mark_failed(result.get("error") or "Unknown dispatch error")
            logger.error(
                "Notification dispatch failed",
                notification_id=str(notification.id),
                error=notification.failure_reason,
            )

        repo.add(notification)
