"""Delete own account use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.domain.service import UserService
from ideabox.domain.value import UserId


class DeleteMeRequest(BaseModel):
    """Delete own account request."""

    user_id: str  # User ID from authenticated user


class DeleteMeUseCase:
    """Use case for soft-deleting the authenticated user's account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteMeRequest) -> None:
        """Soft-delete the account."""
        await self.user_service.delete_user(UserId(UUID(request.user_id)))
