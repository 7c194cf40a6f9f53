"""Welcome notification template: sent when a user registers."""

from datetime import UTC, datetime

from notifications.notification.notification import NotificationChannel, NotificationType

_HTML = """\
<div style="font-family: 'Segoe UI', Arial, sans-serif; background-color: #f9f9f9; padding: 40px 0;">
  <div style="max-width: 600px; margin: auto; background-color: #ffffff; border-radius: 10px; overflow: hidden;">
    <div style="background-color: #111827; padding: 20px 30px;">
      <h1 style="color: #ffffff; margin: 0; font-size: 24px;">Welcome to Nexora</h1>
    </div>
    <div style="padding: 30px;">
      <p style="font-size: 16px; color: #111827; margin: 0 0 15px 0;">Dear <strong>{full_name}</strong>,</p>
      <p style="font-size: 15px; color: #374151; line-height: 1.6;">
        Thank you for joining <strong>Nexora</strong>, your new home for discovering, buying and selling
        unique products in our growing marketplace.
      </p>
      <p style="font-size: 15px; color: #374151; line-height: 1.6;">
        We're thrilled to have you on board. Start exploring, connecting and creating opportunities today.
      </p>
      <a href="https://nexora.market"
         style="display: inline-block; margin: 25px 0 10px; background-color: #111827; color: #ffffff;
                text-decoration: none; padding: 12px 24px; border-radius: 6px; font-weight: 500;">
        Visit Nexora
      </a>
      <p style="font-size: 14px; color: #6b7280; margin-top: 25px;">
        Best regards,<br/><strong>The Nexora Team</strong>
      </p>
    </div>
    <div style="background-color: #f3f4f6; padding: 15px 30px; text-align: center; font-size: 12px; color: #9ca3af;">
      &copy; {year} Nexora Marketplace. All rights reserved.
    </div>
  </div>
</div>
"""


class WelcomeTemplate:
    notification_type = NotificationType.WELCOME.value
    default_channels = [NotificationChannel.EMAIL.value]

    @staticmethod
    def render(context: dict) -> dict:
        full_name = " ".join(part for part in (context.get("first_name"), context.get("last_name")) if part)
        return {
            "subject": "Welcome to Our Service.",
            "body": "Thanks for registering with us!",
            "html_body": _HTML.format(
                full_name=full_name or context.get("username") or "there",
                year=datetime.now(UTC).year,
            ),
        }
