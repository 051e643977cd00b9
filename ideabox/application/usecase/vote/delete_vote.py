"""Delete vote use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.domain.service import UserService, VoteService
from ideabox.domain.value import UserId, VoteId


class DeleteVoteRequest(BaseModel):
    """Delete vote request."""

    vote_id: str
    actor_id: str  # User ID from authenticated user


class DeleteVoteUseCase:
    """Use case for soft-deleting a vote (owner or admin)."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: DeleteVoteRequest) -> None:
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        await self.vote_service.delete_vote(actor, VoteId(UUID(request.vote_id)))
