"""Outbound e-mail domain service."""

import logfire
from pydantic import BaseModel

from ideabox.config import EmailSettings, FrontendSettings
from ideabox.domain.model import User
from ideabox.domain.value import EmailTokenCode

from .base import Service


class EmailMessage(BaseModel):
    """A rendered e-mail."""

    to: str
    from_address: str
    subject: str
    text: str
    html: str


class EmailSender:
    """Delivers rendered e-mails."""

    async def send(self, message: EmailMessage) -> None:
        """Send a message.

        Raises:
            InternalFailureError: If delivery failed
        """
        raise NotImplementedError


class EmailService(Service):
    """Renders the verification and password reset e-mails."""

    def __init__(
        self,
        email_sender: EmailSender,
        email_settings: EmailSettings,
        frontend_settings: FrontendSettings,
    ) -> None:
        """Initialize e-mail service.

        Args:
            email_sender: Delivery backend
            email_settings: Sender domain and from addresses
            frontend_settings: Base URL and routes for links
        """
        self.email_sender = email_sender
        self.email_settings = email_settings
        self.frontend_settings = frontend_settings

    def _link(self, route: str, code: EmailTokenCode) -> str:
        base_url = self.frontend_settings.base_url.rstrip("/")
        return f"{base_url}/{route.lstrip('/')}{code.root}"

    def _from(self, local_part: str) -> str:
        return f"{local_part}@{self.email_settings.domain}"

    async def send_verification_email(self, user: User, code: EmailTokenCode) -> None:
        """Send the link that verifies a user's e-mail address."""
        with logfire.span("email_service.send_verification_email", user_id=str(user.id)):
            link = self._link(self.frontend_settings.verify_email_route, code)
            await self.email_sender.send(
                EmailMessage(
                    to=user.email,
                    from_address=self._from(self.email_settings.verify_email_from),
                    subject="Welcome! Please verify your email address",
                    text=link,
                    html=f"<a href='{link}'>Please click to verify your email</a>",
                )
            )
            logfire.info("Verification e-mail sent", user_id=str(user.id))

    async def send_reset_password_email(
        self, user: User, code: EmailTokenCode
    ) -> None:
        """Send the link to the frontend's password reset page."""
        with logfire.span(
            "email_service.send_reset_password_email", user_id=str(user.id)
        ):
            link = self._link(self.frontend_settings.reset_password_route, code)
            await self.email_sender.send(
                EmailMessage(
                    to=user.email,
                    from_address=self._from(self.email_settings.reset_password_from),
                    subject=f"Reset your password on {self.email_settings.domain}",
                    text=link,
                    html=f"<a href='{link}'>Please click to reset your password</a>",
                )
            )
            logfire.info("Password reset e-mail sent", user_id=str(user.id))
