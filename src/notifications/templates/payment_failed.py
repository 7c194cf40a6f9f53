"""Payment failure template: sent when a payment cannot be verified."""

from notifications.notification.notification import NotificationChannel, NotificationType


class PaymentFailedTemplate:
    notification_type = NotificationType.PAYMENT_FAILED.value
    default_channels = [NotificationChannel.EMAIL.value]

    @staticmethod
    def render(context: dict) -> dict:
        username = context.get("username") or "there"
        order_id = context.get("order_id", "")
        return {
            "subject": "Payment Failed",
            "body": f"Your payment for order ID: {order_id} could not be processed.",
            "html_body": (
                "<h1>Payment Failed</h1>"
                f"<p>Dear {username},</p>"
                f"<p>Unfortunately, your payment for the order ID: {order_id} has failed.</p>"
                "<p>Please try again or contact support if the issue persists.</p>"
                "<p>Best regards,<br/>The Nexora Team</p>"
            ),
        }
