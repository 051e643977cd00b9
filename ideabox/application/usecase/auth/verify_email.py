"""Verify e-mail use case."""

from pydantic import BaseModel

from ideabox.application.usecase.common import UserInfo
from ideabox.domain.service import AuthService
from ideabox.domain.value import EmailTokenCode


class VerifyEmailRequest(BaseModel):
    """Verify e-mail request."""

    code: EmailTokenCode


class VerifyEmailResponse(UserInfo):
    """Verify e-mail response: the verified user."""


class VerifyEmailUseCase:
    """Use case for redeeming an e-mail verification token."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: VerifyEmailRequest) -> VerifyEmailResponse:
        """Redeem the token.

        Raises:
            NotFoundError: If the token doesn't exist or was already used
            TokenExpiredError: If the token has expired
        """
        user = await self.auth_service.verify_email(request.code)
        return VerifyEmailResponse(**UserInfo.from_user(user).model_dump())
