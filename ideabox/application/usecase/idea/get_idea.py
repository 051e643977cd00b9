"""Get idea use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import IdeaInfo
from ideabox.domain.service import IdeaService
from ideabox.domain.value import IdeaId


class GetIdeaRequest(BaseModel):
    """Get idea request."""

    idea_id: str


class GetIdeaResponse(IdeaInfo):
    """Get idea response."""


class GetIdeaUseCase:
    """Use case for fetching a single idea."""

    def __init__(self, idea_service: IdeaService) -> None:
        self.idea_service = idea_service

    async def execute(self, request: GetIdeaRequest) -> GetIdeaResponse:
        idea = await self.idea_service.get_idea(IdeaId(UUID(request.idea_id)))
        return GetIdeaResponse(**IdeaInfo.from_idea(idea).model_dump())
