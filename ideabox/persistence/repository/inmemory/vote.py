"""In-memory vote repository for testing."""

from typing import Optional

from ideabox.domain.error import ConflictError
from ideabox.domain.model.common import utcnow
from ideabox.domain.model.vote import Vote
from ideabox.domain.repository.vote import VoteRepository
from ideabox.domain.value import IdeaId, RecordStatus, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    def _select(self, include_deleted: bool) -> list[Vote]:
        return [v for v in self._votes.values() if include_deleted or v.is_active]

    async def find_by_id(
        self, vote_id: VoteId, include_deleted: bool = False
    ) -> Optional[Vote]:
        """Find a vote by ID."""
        vote = self._votes.get(vote_id)
        if vote and (include_deleted or vote.is_active):
            return vote
        return None

    async def find_active_by_user_and_idea(
        self, user_id: UserId, idea_id: IdeaId
    ) -> Optional[Vote]:
        """Find a user's active vote on an idea."""
        for vote in self._select(include_deleted=False):
            if vote.user_id == user_id and vote.idea_id == idea_id:
                return vote
        return None

    async def find_by_idea(
        self, idea_id: IdeaId, include_deleted: bool = False
    ) -> list[Vote]:
        """Find the votes on an idea."""
        return [v for v in self._select(include_deleted) if v.idea_id == idea_id]

    async def find_by_user(
        self, user_id: UserId, include_deleted: bool = False
    ) -> list[Vote]:
        """Find the votes cast by a user."""
        return [v for v in self._select(include_deleted) if v.user_id == user_id]

    async def find_all(self, include_deleted: bool = False) -> list[Vote]:
        """Find all votes."""
        return self._select(include_deleted)

    async def find_deleted(self) -> list[Vote]:
        """Find soft-deleted votes only."""
        return [v for v in self._votes.values() if not v.is_active]

    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Raises:
            ConflictError: If the user already has an active vote on the idea
        """
        if await self.find_active_by_user_and_idea(vote.user_id, vote.idea_id):
            raise ConflictError("idea_id", str(vote.idea_id))
        self._votes[vote.id] = vote
        return vote

    async def update(self, vote: Vote) -> Vote:
        """Persist a vote's type."""
        self._votes[vote.id] = vote
        return vote

    async def soft_delete(self, vote_id: VoteId) -> int:
        """Mark a vote DELETED."""
        vote = await self.find_by_id(vote_id)
        if not vote:
            return 0
        now = utcnow()
        self._votes[vote_id] = vote.model_copy(
            update={"status": RecordStatus.DELETED, "deleted_at": now, "updated_at": now}
        )
        return 1
