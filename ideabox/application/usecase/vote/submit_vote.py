"""Submit vote use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import VoteInfo
from ideabox.domain.service import VoteService
from ideabox.domain.value import IdeaId, UserId, VoteType


class SubmitVoteRequest(BaseModel):
    """Submit vote request. Direction is ``up`` or ``down``."""

    idea_id: str  # UUID string
    direction: VoteType
    user_id: str  # User ID from authenticated user


class SubmitVoteResponse(VoteInfo):
    """Submit vote response.

    ``type`` is ``removed`` when the submission toggled an earlier vote off.
    """


class SubmitVoteUseCase:
    """Use case for voting on an idea."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            The vote after the submission

        Raises:
            ValidationError: If direction is ``removed``
            NotFoundError: If the idea doesn't exist
        """
        vote = await self.vote_service.submit_vote(
            IdeaId(UUID(request.idea_id)),
            UserId(UUID(request.user_id)),
            request.direction,
        )
        return SubmitVoteResponse(**VoteInfo.from_vote(vote).model_dump())
