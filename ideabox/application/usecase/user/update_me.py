"""Update own account use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import UserInfo
from ideabox.domain.service import UserService
from ideabox.domain.value import EmailAddress, Password, UserId, Username


class UpdateMeRequest(BaseModel):
    """Update own account request. Omitted fields stay unchanged."""

    user_id: str  # User ID from authenticated user
    username: Username | None = None
    email: EmailAddress | None = None
    old_password: str | None = None
    new_password: Password | None = None


class UpdateMeResponse(UserInfo):
    """Update own account response: the updated user."""


class UpdateMeUseCase:
    """Use case for editing the authenticated user's account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateMeRequest) -> UpdateMeResponse:
        """Apply the changes.

        Raises:
            ValidationError: If only one of old/new password is given
            NotAuthorizedError: If the old password is wrong
            ConflictError: If the new username or e-mail is taken
        """
        user = await self.user_service.update_user(
            UserId(UUID(request.user_id)),
            username=request.username,
            email=request.email,
            old_password=request.old_password,
            new_password=request.new_password,
        )
        return UpdateMeResponse(**UserInfo.from_user(user).model_dump())
