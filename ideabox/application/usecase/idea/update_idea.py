"""Update idea use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import IdeaInfo
from ideabox.domain.service import IdeaService, UserService
from ideabox.domain.value import IdeaId, UserId


class UpdateIdeaRequest(BaseModel):
    """Update idea request. Omitted fields stay unchanged."""

    idea_id: str
    actor_id: str  # User ID from authenticated user
    headline: str | None = None
    description: str | None = None


class UpdateIdeaResponse(IdeaInfo):
    """Update idea response."""


class UpdateIdeaUseCase:
    """Use case for editing an idea (owner or admin)."""

    def __init__(self, idea_service: IdeaService, user_service: UserService) -> None:
        self.idea_service = idea_service
        self.user_service = user_service

    async def execute(self, request: UpdateIdeaRequest) -> UpdateIdeaResponse:
        """Apply the update.

        Raises:
            NotFoundError: If the idea doesn't exist
            NotAuthorizedError: If the actor is neither owner nor admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        idea = await self.idea_service.update_idea(
            actor,
            IdeaId(UUID(request.idea_id)),
            headline=request.headline,
            description=request.description,
        )
        return UpdateIdeaResponse(**IdeaInfo.from_idea(idea).model_dump())
