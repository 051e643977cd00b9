"""Idea entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ideabox.domain.model.common import SoftDeletableModel, utcnow
from ideabox.domain.value import DomainId, IdeaId, UserId


class Idea(SoftDeletableModel):
    """Idea posted for a domain."""

    id: IdeaId
    headline: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    user_id: UserId
    domain_id: DomainId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class RankedIdea(Idea):
    """Idea with its vote score, as returned by the ranking query."""

    score: int = 0
