"""SendGrid e-mail sender.

Delivers rendered messages through the SendGrid v3 mail send API.
"""

import httpx
import logfire

from ideabox.config import EmailSettings
from ideabox.domain.error import InternalFailureError
from ideabox.domain.service.email_service import EmailMessage, EmailSender


class SendGridEmailSender(EmailSender):
    """E-mail sender backed by the SendGrid HTTP API."""

    def __init__(self, email_settings: EmailSettings, deliver: bool) -> None:
        """Initialize SendGrid sender.

        Args:
            email_settings: API key and endpoint
            deliver: Whether to actually send; outside production messages
                are only logged unless EMAIL__SHOULD_SEND_IN_DEV is set
        """
        self.email_settings = email_settings
        self.deliver = deliver

    def _payload(self, message: EmailMessage) -> dict:
        return {
            "personalizations": [{"to": [{"email": message.to}]}],
            "from": {"email": message.from_address},
            "subject": message.subject,
            "content": [
                {"type": "text/plain", "value": message.text},
                {"type": "text/html", "value": message.html},
            ],
        }

    async def send(self, message: EmailMessage) -> None:
        """Send a message.

        Raises:
            InternalFailureError: If SendGrid rejected the message or was unreachable
        """
        if not self.deliver:
            logfire.info(
                "E-mail delivery disabled, message logged only",
                to=message.to,
                subject=message.subject,
                text=message.text,
            )
            return

        if not self.email_settings.sendgrid_api_key:
            logfire.error("SendGrid API key is not configured")
            raise InternalFailureError()

        try:
            async with httpx.AsyncClient(timeout=10.0) as client:
                response = await client.post(
                    self.email_settings.sendgrid_url,
                    json=self._payload(message),
                    headers={
                        "Authorization": f"Bearer {self.email_settings.sendgrid_api_key}"
                    },
                )
        except httpx.HTTPError as e:
            logfire.error("SendGrid HTTP error", error=str(e))
            raise InternalFailureError() from e

        if response.status_code >= 300:
            logfire.error(
                "SendGrid rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            raise InternalFailureError()

        logfire.info("E-mail sent", to=message.to, subject=message.subject)


class RecordingEmailSender(EmailSender):
    """E-mail sender for testing.

    Keeps every message instead of sending it. Set ``fail`` to simulate an
    outage.
    """

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self.fail = False

    async def send(self, message: EmailMessage) -> None:
        """Record a message."""
        if self.fail:
            raise InternalFailureError()
        self.sent.append(message)
