"""PostgreSQL implementation of Domain repository."""

from typing import List, Optional

from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.domain.model import Domain
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import DomainRepository
from ideabox.domain.value import DomainId, DomainName, RecordStatus, UserId
from ideabox.persistence.error import translate_errors
from ideabox.persistence.mappers import domain_to_dict, row_to_domain
from ideabox.persistence.tables import domains_table

_ACTIVE = domains_table.c.status == RecordStatus.ACTIVE.value


class PostgresDomainRepository(DomainRepository):
    """PostgreSQL implementation of DomainRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_all(self, stmt) -> List[Domain]:
        with translate_errors("domains.select"):
            result = await self.session.execute(stmt)
        return [row_to_domain(dict(row)) for row in result.mappings().all()]

    async def find_by_id(
        self, domain_id: DomainId, include_deleted: bool = False
    ) -> Optional[Domain]:
        """Find a domain by ID."""
        stmt = select(domains_table).where(domains_table.c.id == domain_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        domains = await self._fetch_all(stmt)
        return domains[0] if domains else None

    async def find_by_name(self, name: DomainName) -> Optional[Domain]:
        """Find an active domain by name."""
        stmt = select(domains_table).where(
            and_(domains_table.c.name == name.root, _ACTIVE)
        )
        domains = await self._fetch_all(stmt)
        return domains[0] if domains else None

    async def find_by_user(
        self, user_id: UserId, include_deleted: bool = False
    ) -> List[Domain]:
        """Find the domains a user registered."""
        stmt = select(domains_table).where(domains_table.c.user_id == user_id)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(domains_table.c.created_at))

    async def find_all(self, include_deleted: bool = False) -> List[Domain]:
        """Find all domains."""
        stmt = select(domains_table)
        if not include_deleted:
            stmt = stmt.where(_ACTIVE)
        return await self._fetch_all(stmt.order_by(domains_table.c.created_at))

    async def find_deleted(self) -> List[Domain]:
        """Find soft-deleted domains only."""
        stmt = select(domains_table).where(
            domains_table.c.status == RecordStatus.DELETED.value
        )
        return await self._fetch_all(stmt.order_by(domains_table.c.deleted_at))

    async def save(self, domain: Domain) -> Domain:
        """Save a domain (create or update)."""
        existing = await self.find_by_id(domain.id, include_deleted=True)
        domain_dict = domain_to_dict(domain)

        with translate_errors("domains.save"):
            async with self.session.begin_nested():
                if existing:
                    stmt = (
                        domains_table.update()
                        .where(domains_table.c.id == domain.id)
                        .values(**domain_dict)
                    )
                else:
                    stmt = domains_table.insert().values(**domain_dict)
                await self.session.execute(stmt)

        return domain

    async def soft_delete(self, domain_id: DomainId) -> int:
        """Mark a domain DELETED."""
        now = utcnow()
        stmt = (
            update(domains_table)
            .where(and_(domains_table.c.id == domain_id, _ACTIVE))
            .values(
                status=RecordStatus.DELETED.value, deleted_at=now, updated_at=now
            )
        )
        with translate_errors("domains.soft_delete"):
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
