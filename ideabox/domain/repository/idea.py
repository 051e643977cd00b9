"""Idea repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ideabox.domain.model.idea import Idea, RankedIdea
from ideabox.domain.value import DomainId, IdeaId


class IdeaRepository(ABC):
    """Repository for Idea entity."""

    @abstractmethod
    async def find_by_id(
        self, idea_id: IdeaId, include_deleted: bool = False
    ) -> Optional[Idea]:
        """Find an idea by ID."""
        pass

    @abstractmethod
    async def find_all(self, include_deleted: bool = False) -> List[Idea]:
        """Find all ideas."""
        pass

    @abstractmethod
    async def find_deleted(self) -> List[Idea]:
        """Find soft-deleted ideas only."""
        pass

    @abstractmethod
    async def rank_by_domain(
        self, domain_id: DomainId, limit: int, offset: int
    ) -> List[RankedIdea]:
        """Rank the active ideas of a domain by vote score.

        Score is the sum of the weights of the idea's active votes
        (UP +1, DOWN -1, REMOVED 0). Ideas without votes score 0.
        Ties are broken by creation time, then id, both ascending.

        Args:
            domain_id: Domain whose ideas are ranked
            limit: Maximum number of ideas (>= 0)
            offset: Number of ideas to skip (>= 0)

        Returns:
            Ideas with their score, highest first
        """
        pass

    @abstractmethod
    async def save(self, idea: Idea) -> Idea:
        """Save an idea (create or update)."""
        pass

    @abstractmethod
    async def soft_delete(self, idea_id: IdeaId) -> int:
        """Mark an idea DELETED.

        Returns:
            Number of affected rows
        """
        pass
