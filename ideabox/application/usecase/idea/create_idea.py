"""Create idea use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import IdeaInfo
from ideabox.domain.service import IdeaService, UserService
from ideabox.domain.value import DomainId, UserId


class CreateIdeaRequest(BaseModel):
    """Create idea request."""

    domain_id: str
    headline: str
    description: str | None = None
    user_id: str  # User ID from authenticated user


class CreateIdeaResponse(IdeaInfo):
    """Create idea response."""


class CreateIdeaUseCase:
    """Use case for posting an idea on a domain."""

    def __init__(self, idea_service: IdeaService, user_service: UserService) -> None:
        """Initialize create idea use case.

        Args:
            idea_service: Idea domain service
            user_service: User domain service
        """
        self.idea_service = idea_service
        self.user_service = user_service

    async def execute(self, request: CreateIdeaRequest) -> CreateIdeaResponse:
        """Execute create idea flow.

        Raises:
            NotFoundError: If the user or domain doesn't exist
            ValueError: If headline or description is invalid
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        idea = await self.idea_service.create_idea(
            user,
            DomainId(UUID(request.domain_id)),
            headline=request.headline,
            description=request.description,
        )
        return CreateIdeaResponse(**IdeaInfo.from_idea(idea).model_dump())
