"""In-memory idea repository for testing."""

from typing import Optional

from ideabox.domain.model.common import utcnow
from ideabox.domain.model.idea import Idea, RankedIdea
from ideabox.domain.repository.idea import IdeaRepository
from ideabox.domain.repository.vote import VoteRepository
from ideabox.domain.value import DomainId, IdeaId, RecordStatus


class InMemoryIdeaRepository(IdeaRepository):
    """In-memory implementation of IdeaRepository for testing.

    Ranking reads the votes of the paired vote repository, the way the SQL
    query joins the votes table.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        self._ideas: dict[IdeaId, Idea] = {}
        self._vote_repository = vote_repository

    def _select(self, include_deleted: bool) -> list[Idea]:
        return [i for i in self._ideas.values() if include_deleted or i.is_active]

    async def find_by_id(
        self, idea_id: IdeaId, include_deleted: bool = False
    ) -> Optional[Idea]:
        """Find an idea by ID."""
        idea = self._ideas.get(idea_id)
        if idea and (include_deleted or idea.is_active):
            return idea
        return None

    async def find_all(self, include_deleted: bool = False) -> list[Idea]:
        """Find all ideas."""
        return self._select(include_deleted)

    async def find_deleted(self) -> list[Idea]:
        """Find soft-deleted ideas only."""
        return [i for i in self._ideas.values() if not i.is_active]

    async def rank_by_domain(
        self, domain_id: DomainId, limit: int, offset: int
    ) -> list[RankedIdea]:
        """Rank the active ideas of a domain by vote score."""
        ranked = []
        for idea in self._select(include_deleted=False):
            if idea.domain_id != domain_id:
                continue
            votes = await self._vote_repository.find_by_idea(idea.id)
            score = sum(vote.weight for vote in votes)
            ranked.append(RankedIdea(**idea.model_dump(), score=score))

        ranked.sort(key=lambda r: (-r.score, r.created_at, r.id))
        return ranked[offset : offset + limit]

    async def save(self, idea: Idea) -> Idea:
        """Save or update an idea."""
        self._ideas[idea.id] = idea
        return idea

    async def soft_delete(self, idea_id: IdeaId) -> int:
        """Mark an idea DELETED."""
        idea = await self.find_by_id(idea_id)
        if not idea:
            return 0
        now = utcnow()
        self._ideas[idea_id] = idea.model_copy(
            update={"status": RecordStatus.DELETED, "deleted_at": now, "updated_at": now}
        )
        return 1
