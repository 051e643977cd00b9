"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.domain.model import User
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import UserRepository
from ideabox.domain.value import AuthProvider, RecordStatus, UserId
from ideabox.persistence.error import translate_errors
from ideabox.persistence.mappers import row_to_user, user_to_dict
from ideabox.persistence.tables import users_table

_ACTIVE = users_table.c.status == RecordStatus.ACTIVE.value


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[User]:
        with translate_errors("users.select"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def _fetch_all(self, stmt) -> List[User]:
        with translate_errors("users.select"):
            result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up
            include_deleted: Whether soft-deleted users are returned

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_one(stmt)

    async def find_by_normalized_username(
        self, normalized_username: str
    ) -> Optional[User]:
        """Find an active user by lowercased username."""
        stmt = select(users_table).where(
            and_(users_table.c.normalized_username == normalized_username, _ACTIVE)
        )
        return await self._fetch_one(stmt)

    async def find_by_normalized_email(self, normalized_email: str) -> Optional[User]:
        """Find an active user by normalized e-mail."""
        stmt = select(users_table).where(
            and_(users_table.c.normalized_email == normalized_email, _ACTIVE)
        )
        return await self._fetch_one(stmt)

    async def find_by_provider_id(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[User]:
        """Find the active user linked to an OAuth provider account."""
        stmt = select(users_table).where(
            and_(users_table.c[provider.value] == provider_user_id, _ACTIVE)
        )
        return await self._fetch_one(stmt)

    async def find_all(self, include_deleted: bool = False) -> List[User]:
        """Find all users."""
        stmt = select(users_table)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(users_table.c.created_at))

    async def find_deleted(self) -> List[User]:
        """Find soft-deleted users only."""
        stmt = select(users_table).where(
            users_table.c.status == RecordStatus.DELETED.value
        )
        return await self._fetch_all(stmt.order_by(users_table.c.deleted_at))

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If username or e-mail is already taken
        """
        existing = await self.find_by_id(user.id, include_deleted=True)
        user_dict = user_to_dict(user)

        with translate_errors("users.save"):
            async with self.session.begin_nested():
                if existing:
                    stmt = (
                        users_table.update()
                        .where(users_table.c.id == user.id)
                        .values(**user_dict)
                    )
                else:
                    stmt = users_table.insert().values(**user_dict)
                await self.session.execute(stmt)

        return user

    async def soft_delete(self, user_id: UserId) -> int:
        """Mark a user DELETED."""
        now = utcnow()
        stmt = (
            update(users_table)
            .where(and_(users_table.c.id == user_id, _ACTIVE))
            .values(
                status=RecordStatus.DELETED.value, deleted_at=now, updated_at=now
            )
        )
        with translate_errors("users.soft_delete"):
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
