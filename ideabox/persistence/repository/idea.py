"""PostgreSQL implementation of Idea repository."""

from typing import List, Optional

from sqlalchemy import and_, asc, case, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.domain.model import Idea, RankedIdea
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import IdeaRepository
from ideabox.domain.value import DomainId, IdeaId, RecordStatus, VoteType
from ideabox.persistence.error import translate_errors
from ideabox.persistence.mappers import idea_to_dict, row_to_idea, row_to_ranked_idea
from ideabox.persistence.tables import ideas_table, votes_table

_ACTIVE = ideas_table.c.status == RecordStatus.ACTIVE.value


class PostgresIdeaRepository(IdeaRepository):
    """PostgreSQL implementation of IdeaRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_all(self, stmt) -> List[Idea]:
        with translate_errors("ideas.select"):
            result = await self.session.execute(stmt)
        return [row_to_idea(dict(row)) for row in result.mappings().all()]

    async def find_by_id(
        self, idea_id: IdeaId, include_deleted: bool = False
    ) -> Optional[Idea]:
        """Find an idea by ID."""
        stmt = select(ideas_table).where(ideas_table.c.id == idea_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        ideas = await self._fetch_all(stmt)
        return ideas[0] if ideas else None

    async def find_all(self, include_deleted: bool = False) -> List[Idea]:
        """Find all ideas."""
        stmt = select(ideas_table)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(ideas_table.c.created_at))

    async def find_deleted(self) -> List[Idea]:
        """Find soft-deleted ideas only."""
        stmt = select(ideas_table).where(
            ideas_table.c.status == RecordStatus.DELETED.value
        )
        return await self._fetch_all(stmt.order_by(ideas_table.c.deleted_at))

    async def rank_by_domain(
        self, domain_id: DomainId, limit: int, offset: int
    ) -> List[RankedIdea]:
        """Rank the active ideas of a domain by vote score.

        Votes are outer-joined so ideas without votes score 0. Only active
        votes count, and REMOVED votes weigh nothing.
        """
        weight = case(
            (votes_table.c.type == VoteType.UP.value, 1),
            (votes_table.c.type == VoteType.DOWN.value, -1),
            else_=0,
        )
        score = func.coalesce(func.sum(weight), 0).label("score")

        stmt = (
            select(ideas_table, score)
            .select_from(
                ideas_table.outerjoin(
                    votes_table,
                    and_(
                        votes_table.c.idea_id == ideas_table.c.id,
                        votes_table.c.status == RecordStatus.ACTIVE.value,
                    ),
                )
            )
            .where(and_(ideas_table.c.domain_id == domain_id, _ACTIVE))
            .group_by(ideas_table.c.id)
            .order_by(
                desc("score"),
                asc(ideas_table.c.created_at),
                asc(ideas_table.c.id),
            )
            .limit(limit)
            .offset(offset)
        )

        with translate_errors("ideas.rank_by_domain"):
            result = await self.session.execute(stmt)
        return [row_to_ranked_idea(dict(row)) for row in result.mappings().all()]

    async def save(self, idea: Idea) -> Idea:
        """Save an idea (create or update)."""
        existing = await self.find_by_id(idea.id, include_deleted=True)
        idea_dict = idea_to_dict(idea)

        with translate_errors("ideas.save"):
            if existing:
                stmt = (
                    ideas_table.update()
                    .where(ideas_table.c.id == idea.id)
                    .values(**idea_dict)
                )
            else:
                stmt = ideas_table.insert().values(**idea_dict)
            await self.session.execute(stmt)
            await self.session.flush()

        return idea

    async def soft_delete(self, idea_id: IdeaId) -> int:
        """Mark an idea DELETED."""
        now = utcnow()
        stmt = (
            update(ideas_table)
            .where(and_(ideas_table.c.id == idea_id, _ACTIVE))
            .values(
                status=RecordStatus.DELETED.value, deleted_at=now, updated_at=now
            )
        )
        with translate_errors("ideas.soft_delete"):
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
