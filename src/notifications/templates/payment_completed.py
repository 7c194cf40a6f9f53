"""Payment confirmation template: sent when a payment is verified."""

from notifications.notification.notification import NotificationChannel, NotificationType


class PaymentCompletedTemplate:
    notification_type = NotificationType.PAYMENT_COMPLETED.value
    default_channels = [NotificationChannel.EMAIL.value]

    @staticmethod
    def render(context: dict) -> dict:
        username = context.get("username") or "there"
        order_id = context.get("order_id", "")
        amount = f"{context.get('currency', 'INR')} {context.get('amount', 0)}"
        return {
            "subject": "Payment Successful",
            "body": f"We have received your payment of {amount} for order ID: {order_id}.",
            "html_body": (
                "<h1>Payment successful</h1>"
                f"<p>Dear {username},</p>"
                f"<p>We have received your payment of {amount} for order ID: {order_id}.</p>"
                "<p>Thank you for your purchase!</p>"
                "<p>Best regards,<br/>The Nexora Team</p>"
            ),
        }
