"""Mock e-mail providers for testing."""

from dishka import Scope, provide

from ideabox.adapter.sendgrid import RecordingEmailSender
from ideabox.domain.service import EmailSender
from ideabox.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock e-mail provider recording messages instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_sender(self) -> RecordingEmailSender:
        """Provide recording sender (for assertions)."""
        return RecordingEmailSender()

    @provide(scope=Scope.APP)
    def get_email_sender(self, sender: RecordingEmailSender) -> EmailSender:
        """Provide the recording sender as the domain's EmailSender."""
        return sender
