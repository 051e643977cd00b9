"""SendGrid e-mail delivery adapter."""

from .sender import RecordingEmailSender, SendGridEmailSender

__all__ = ["SendGridEmailSender", "RecordingEmailSender"]
