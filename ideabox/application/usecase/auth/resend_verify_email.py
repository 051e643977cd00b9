"""Resend verification e-mail use case."""

from pydantic import BaseModel

from ideabox.domain.service import AuthService


class ResendVerifyEmailRequest(BaseModel):
    """Resend verification e-mail request."""

    email: str


class ResendVerifyEmailUseCase:
    """Use case for mailing a new verification link."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ResendVerifyEmailRequest) -> None:
        """Send a new link; unknown addresses succeed silently."""
        await self.auth_service.resend_verification(request.email)
