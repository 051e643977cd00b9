"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.domain.model import Vote
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import VoteRepository
from ideabox.domain.value import IdeaId, RecordStatus, UserId, VoteId
from ideabox.persistence.error import translate_errors
from ideabox.persistence.mappers import row_to_vote, vote_to_dict
from ideabox.persistence.tables import votes_table

_ACTIVE = votes_table.c.status == RecordStatus.ACTIVE.value


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_all(self, stmt) -> List[Vote]:
        with translate_errors("votes.select"):
            result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def find_by_id(
        self, vote_id: VoteId, include_deleted: bool = False
    ) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        votes = await self._fetch_all(stmt)
        return votes[0] if votes else None

    async def find_active_by_user_and_idea(
        self, user_id: UserId, idea_id: IdeaId
    ) -> Optional[Vote]:
        """Find a user's active vote on an idea."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.idea_id == idea_id,
                _ACTIVE,
            )
        )
        votes = await self._fetch_all(stmt)
        return votes[0] if votes else None

    async def find_by_idea(
        self, idea_id: IdeaId, include_deleted: bool = False
    ) -> List[Vote]:
        """Find the votes on an idea."""
        stmt = select(votes_table).where(votes_table.c.idea_id == idea_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(votes_table.c.created_at))

    async def find_by_user(
        self, user_id: UserId, include_deleted: bool = False
    ) -> List[Vote]:
        """Find the votes cast by a user."""
        stmt = select(votes_table).where(votes_table.c.user_id == user_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(votes_table.c.created_at))

    async def find_all(self, include_deleted: bool = False) -> List[Vote]:
        """Find all votes."""
        stmt = select(votes_table)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(votes_table.c.created_at))

    async def find_deleted(self) -> List[Vote]:
        """Find soft-deleted votes only."""
        stmt = select(votes_table).where(
            votes_table.c.status == RecordStatus.DELETED.value
        )
        return await self._fetch_all(stmt.order_by(votes_table.c.deleted_at))

    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote.

        The insert runs in a savepoint so that losing the race on the
        (user_id, idea_id) index leaves the request's transaction usable.

        Raises:
            ConflictError: If the user already has an active vote on the idea
        """
        with translate_errors("votes.create"):
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(votes_table).values(**vote_to_dict(vote))
                )
        return vote

    async def update(self, vote: Vote) -> Vote:
        """Persist a vote's type."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote.id)
            .values(type=vote.type.value, updated_at=vote.updated_at)
        )
        with translate_errors("votes.update"):
            await self.session.execute(stmt)
            await self.session.flush()
        return vote

    async def soft_delete(self, vote_id: VoteId) -> int:
        """Mark a vote DELETED."""
        now = utcnow()
        stmt = (
            update(votes_table)
            .where(and_(votes_table.c.id == vote_id, _ACTIVE))
            .values(
                status=RecordStatus.DELETED.value, deleted_at=now, updated_at=now
            )
        )
        with translate_errors("votes.soft_delete"):
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
