"""Rank ideas use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import RankedIdeaInfo
from ideabox.domain.service import IdeaService
from ideabox.domain.service.idea_service import DEFAULT_RANK_LIMIT
from ideabox.domain.value import DomainId


class RankIdeasRequest(BaseModel):
    """Rank ideas request."""

    domain_id: str
    limit: int = DEFAULT_RANK_LIMIT
    offset: int = 0


class RankIdeasResponse(BaseModel):
    """Rank ideas response, highest score first."""

    ideas: list[RankedIdeaInfo]


class RankIdeasUseCase:
    """Use case for listing a domain's ideas by vote score."""

    def __init__(self, idea_service: IdeaService) -> None:
        """Initialize rank ideas use case.

        Args:
            idea_service: Idea domain service
        """
        self.idea_service = idea_service

    async def execute(self, request: RankIdeasRequest) -> RankIdeasResponse:
        """Execute rank ideas flow.

        Raises:
            ValidationError: If limit or offset is out of range
        """
        ranked = await self.idea_service.rank_ideas_for_domain(
            DomainId(UUID(request.domain_id)),
            limit=request.limit,
            offset=request.offset,
        )
        return RankIdeasResponse(
            ideas=[RankedIdeaInfo.from_ranked_idea(idea) for idea in ranked]
        )
