"""
Outbound email through SendGrid.

Delivery is best-effort: ``EmailSender.send`` never raises, it reports
success as a bool so callers can record whether a message went out.
The SendGrid client is blocking, so the API call runs in a worker thread.
"""
import asyncio
import re
from typing import Optional

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Email, Mail, To

from hirehub.core.config import Settings, settings
from hirehub.core.logging import get_logger

logger = get_logger(__name__)

_TAG_RE = re.compile(r"<.*?>", re.DOTALL)


def html_to_text(html: str) -> str:
    """Crude plain-text alternative: strip tags, keep the words."""
    return _TAG_RE.sub("", html or "").strip()


class EmailSender:
    """Sends HTML email through the configured backend."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings

    async def send(self, to_email: str, subject: str, html_body: str) -> bool:
        if self.config.email_backend == "console":
            logger.info("email_console", to=to_email, subject=subject, body=html_body)
            return True

        if not self.config.sendgrid_api_key:
            logger.warning("email_not_configured", to=to_email, subject=subject)
            return False

        message = self._build_message(to_email, subject, html_body)
        try:
            status_code = await asyncio.to_thread(self._deliver, message)
        except (HTTPError, OSError) as e:
            logger.error("email_send_failed", to=to_email, subject=subject, error=str(e))
            return False

        if status_code >= 300:
            logger.error("email_send_failed", to=to_email, subject=subject, status_code=status_code)
            return False

        logger.info("email_sent", to=to_email, subject=subject)
        return True

    def _build_message(self, to_email: str, subject: str, html_body: str) -> Mail:
        return Mail(
            from_email=Email(self.config.email_from_address, self.config.email_from_name),
            to_emails=To(to_email),
            subject=subject,
            plain_text_content=html_to_text(html_body),
            html_content=html_body,
        )

    def _deliver(self, message: Mail) -> int:
        client = SendGridAPIClient(api_key=self.config.sendgrid_api_key)
        response = client.send(message)
        return response.status_code


_email_sender: Optional[EmailSender] = None


def get_email_sender() -> EmailSender:
    """Process-wide sender; overridable as a FastAPI dependency."""
    global _email_sender
    if _email_sender is None:
        _email_sender = EmailSender()
    return _email_sender
