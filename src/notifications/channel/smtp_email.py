"""SMTP email adapter: multipart (text + HTML) mail delivered with aiosmtplib.

Dispatch runs inside synchronous event handlers, which may themselves run
under the API's event loop. Delivery therefore gets its own loop, on a
worker thread when a loop is already running.
"""

import asyncio
import os
from concurrent.futures import ThreadPoolExecutor
from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib
import structlog

from notifications.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)

DEFAULT_SENDER = "Nexora <no-reply@nexora.market>"


def _run_to_completion(coro):
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, coro).result()


class SmtpEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        sender: str = DEFAULT_SENDER,
        use_ssl: bool = False,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "SmtpEmailAdapter":
        port = int(os.getenv("SMTP_PORT", "587"))
        return cls(
            host=os.environ["SMTP_HOST"],
            port=port,
            username=os.getenv("SMTP_USER"),
            password=os.getenv("SMTP_PASSWORD"),
            sender=os.getenv("EMAIL_FROM", DEFAULT_SENDER),
            use_ssl=port == 465,
        )

    def _build_message(self, to: str, subject: str, body: str, html_body: str | None) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain="nexora.market")
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    async def _deliver(self, message: EmailMessage) -> None:
        # use_tls connects over SSL; otherwise upgrade with STARTTLS.
        smtp = aiosmtplib.SMTP(
            hostname=self.host,
            port=self.port,
            use_tls=self.use_ssl,
            start_tls=not self.use_ssl,
            timeout=self.timeout,
        )
        async with smtp:
            if self.username and self.password:
                await smtp.login(self.username, self.password)
            await smtp.send_message(message)

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        message = self._build_message(to, subject, body, html_body)
        try:
            _run_to_completion(self._deliver(message))
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery failed", to=to, host=self.host, error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        logger.info("SMTP delivery accepted", to=to, message_id=message["Message-ID"])
        return {"message_id": message["Message-ID"], "status": "sent"}
