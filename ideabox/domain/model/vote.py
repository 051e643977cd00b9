"""Vote entity.

Votes rank the ideas of a domain. Each user holds at most one active vote
per idea, and repeating the same direction toggles that vote off.
"""

from datetime import datetime

from pydantic import Field

from ideabox.domain.model.common import SoftDeletableModel, utcnow
from ideabox.domain.value import IdeaId, UserId, VoteId, VoteType


class Vote(SoftDeletableModel):
    """Vote entity.

    Business rules:
    - One active vote per user per idea (enforced by a partial unique index)
    - Mutated in place on later votes by the same user on the same idea
    - REMOVED votes stay stored but weigh nothing
    """

    id: VoteId
    user_id: UserId
    idea_id: IdeaId
    type: VoteType
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def weight(self) -> int:
        """Contribution of this vote to its idea's score."""
        return self.type.weight

    def with_type(self, vote_type: VoteType) -> "Vote":
        """Return a copy with a new type."""
        return self.model_copy(update={"type": vote_type, "updated_at": utcnow()})
