"""Shared helper for notification event handlers: render, then create."""

import structlog
from notifications.notification.notification import Notification
from notifications.templates import get_template
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)


def create_email_notification(
    recipient_id: str,
    recipient_email: str | None,
    notification_type: str,
    context: dict,
    source_event_type: str | None = None,
) -> str | None:
    """Render the template for `notification_type` and queue it for the recipient.

    Returns the notification id, or None when there is no address to send to.
    """
    if not recipient_email:
        logger.warning(
            "No email address for notification, skipping",
            recipient_id=recipient_id,
            notification_type=notification_type,
        )
        return None

    template_cls = get_template(notification_type)
    rendered = template_cls.render(context)

    notification = Notification.create(
        recipient_id=recipient_id,
        recipient_email=recipient_email,
        notification_type=notification_type,
        channel=template_cls.default_channels[0],
        subject=rendered.get("subject"),
        body=rendered["body"],
        html_body=rendered.get("html_body"),
        source_event_type=source_event_type,
    )
    current_domain.repository_for(Notification).add(notification)

    logger.info(
        "Notification created",
        notification_id=str(notification.id),
        recipient_id=recipient_id,
        notification_type=notification_type,
    )
    return str(notification.id)
