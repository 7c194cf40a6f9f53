"""In-memory email adapter: keeps an outbox that tests can inspect."""

from uuid import uuid4

from notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    def __init__(self):
        self.outbox: list[dict] = []
        self.error: str | None = None

    def fail_with(self, error: str | None) -> None:
        """Make every following send fail with `error` (None to recover)."""
        self.error = error

    def messages_to(self, address: str) -> list[dict]:
        return [message for message in self.outbox if message["to"] == address]

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        if self.error:
            return {"message_id": None, "status": "failed", "error": self.error}

        message_id = f"email-{uuid4().hex[:12]}"
        self.outbox.append(
            {"message_id": message_id, "to": to, "subject": subject, "body": body, "html_body": html_body}
        )
        return {"message_id": message_id, "status": "sent"}
