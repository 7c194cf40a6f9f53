"""Template registry: maps NotificationType to template classes.

Each template knows its default channels and how to render subject, text
body and HTML body from event context data.
"""

from notifications.notification.notification import NotificationType
from notifications.templates.payment_completed import PaymentCompletedTemplate
from notifications.templates.payment_failed import PaymentFailedTemplate
from notifications.templates.welcome import WelcomeTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.WELCOME.value: WelcomeTemplate,
    NotificationType.PAYMENT_COMPLETED.value: PaymentCompletedTemplate,
    NotificationType.PAYMENT_FAILED.value: PaymentFailedTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
