"""Forgot password use case."""

from pydantic import BaseModel, model_validator

from ideabox.domain.service import AuthService


class ForgotPasswordRequest(BaseModel):
    """Forgot password request: a username or an e-mail address."""

    username: str | None = None
    email: str | None = None

    @model_validator(mode="after")
    def require_username_or_email(self) -> "ForgotPasswordRequest":
        """At least one lookup key is needed."""
        if not self.username and not self.email:
            raise ValueError("username or email is required")
        return self


class ForgotPasswordUseCase:
    """Use case for mailing a password reset link."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ForgotPasswordRequest) -> None:
        """Send the reset link; unknown users succeed silently."""
        await self.auth_service.forgot_password(
            username=request.username, email=request.email
        )
