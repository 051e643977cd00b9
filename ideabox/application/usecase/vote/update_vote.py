"""Update vote use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import VoteInfo
from ideabox.domain.service import UserService, VoteService
from ideabox.domain.value import UserId, VoteId, VoteType


class UpdateVoteRequest(BaseModel):
    """Update vote request. Sets the type directly, without toggling."""

    vote_id: str
    type: VoteType
    actor_id: str  # User ID from authenticated user


class UpdateVoteResponse(VoteInfo):
    """Update vote response."""


class UpdateVoteUseCase:
    """Use case for editing a vote (owner or admin)."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: UpdateVoteRequest) -> UpdateVoteResponse:
        """Apply the update.

        Raises:
            NotFoundError: If the vote doesn't exist
            NotAuthorizedError: If the actor is neither owner nor admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        vote = await self.vote_service.update_vote(
            actor, VoteId(UUID(request.vote_id)), request.type
        )
        return UpdateVoteResponse(**VoteInfo.from_vote(vote).model_dump())
