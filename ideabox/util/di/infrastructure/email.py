"""E-mail infrastructure providers."""

from dishka import Scope, provide

from ideabox.adapter.sendgrid import SendGridEmailSender
from ideabox.config import Settings
from ideabox.domain.service import EmailSender
from ideabox.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """E-mail component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production e-mail provider (SendGrid)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: Settings) -> EmailSender:
        """Provide SendGrid sender.

        Outside production, messages are only logged unless
        EMAIL__SHOULD_SEND_IN_DEV is set.
        """
        deliver = settings.is_production or settings.email.should_send_in_dev
        return SendGridEmailSender(settings.email, deliver=deliver)
