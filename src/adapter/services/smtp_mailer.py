"""
Async SMTP email delivery via aiosmtplib.

Sends plain-text emails with optional STARTTLS. Failures are returned as
error results, never raised.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from libs.result import Error, Result, Return
from src.app.services.mailer import Mailer

logger = logging.getLogger(__name__)


class SmtpMailer(Mailer):
    def __init__(
        self,
        host: str,
        port: int,
        from_email: str,
        from_name: str = "",
        username: str = "",
        password: str = "",
        start_tls: bool = True,
        timeout: float = 15,
    ):
        self.host = host
        self.port = port
        self.from_email = from_email
        self.from_name = from_name
        self.username = username
        self.password = password
        self.start_tls = start_tls
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpMailer":
        return cls(
            host=config.SMTP_HOST,
            port=int(config.SMTP_PORT),
            from_email=config.SMTP_FROM_EMAIL,
            from_name=config.SMTP_FROM_NAME,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            start_tls=bool(config.SMTP_START_TLS),
            timeout=float(config.SMTP_TIMEOUT),
        )

    def is_configured(self) -> bool:
        return bool(self.host and self.from_email)

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = f"{self.from_name} <{self.from_email}>" if self.from_name else self.from_email
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(body)
        return msg

    async def send(self, to: str, subject: str, body: str) -> Result[None]:
        if not self.is_configured():
            logger.warning(f"No SMTP server configured, cannot send '{subject}'")
            return Return.err(Error("EMAIL_NOT_CONFIGURED", "No SMTP server configured"))

        try:
            await aiosmtplib.send(
                self._build_message(to, subject, body),
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=self.start_tls,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error(f"SMTP delivery failed ({self.host}): {exc}")
            return Return.err(Error("EMAIL_DELIVERY_FAILED", "Email could not be delivered"))

        return Return.ok(None)
