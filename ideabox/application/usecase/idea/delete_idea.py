"""Delete idea use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.domain.service import IdeaService, UserService
from ideabox.domain.value import IdeaId, UserId


class DeleteIdeaRequest(BaseModel):
    """Delete idea request."""

    idea_id: str
    actor_id: str  # User ID from authenticated user


class DeleteIdeaUseCase:
    """Use case for soft-deleting an idea (owner or admin)."""

    def __init__(self, idea_service: IdeaService, user_service: UserService) -> None:
        self.idea_service = idea_service
        self.user_service = user_service

    async def execute(self, request: DeleteIdeaRequest) -> None:
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        await self.idea_service.delete_idea(actor, IdeaId(UUID(request.idea_id)))
