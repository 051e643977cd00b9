"""Reset password use case."""

from pydantic import BaseModel

from ideabox.domain.service import AuthService
from ideabox.domain.value import EmailTokenCode, Password


class ResetPasswordRequest(BaseModel):
    """Reset password request."""

    code: EmailTokenCode
    new_password: Password


class ResetPasswordUseCase:
    """Use case for setting a new password with a reset token."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ResetPasswordRequest) -> None:
        """Redeem the token and replace the password.

        Raises:
            NotFoundError: If the token doesn't exist or was already used
            TokenExpiredError: If the token has expired
        """
        await self.auth_service.reset_password(request.code, request.new_password)
