"""In-memory domain repository for testing."""

from typing import Optional

from ideabox.domain.error import ConflictError
from ideabox.domain.model.common import utcnow
from ideabox.domain.model.domain import Domain
from ideabox.domain.repository.domain import DomainRepository
from ideabox.domain.value import DomainId, DomainName, RecordStatus, UserId


class InMemoryDomainRepository(DomainRepository):
    """In-memory implementation of DomainRepository for testing."""

    def __init__(self) -> None:
        self._domains: dict[DomainId, Domain] = {}

    def _select(self, include_deleted: bool) -> list[Domain]:
        return [d for d in self._domains.values() if include_deleted or d.is_active]

    async def find_by_id(
        self, domain_id: DomainId, include_deleted: bool = False
    ) -> Optional[Domain]:
        """Find a domain by ID."""
        domain = self._domains.get(domain_id)
        if domain and (include_deleted or domain.is_active):
            return domain
        return None

    async def find_by_name(self, name: DomainName) -> Optional[Domain]:
        """Find an active domain by name."""
        for domain in self._select(include_deleted=False):
            if domain.name == name:
                return domain
        return None

    async def find_by_user(
        self, user_id: UserId, include_deleted: bool = False
    ) -> list[Domain]:
        """Find the domains a user registered."""
        return [d for d in self._select(include_deleted) if d.user_id == user_id]

    async def find_all(self, include_deleted: bool = False) -> list[Domain]:
        """Find all domains."""
        return self._select(include_deleted)

    async def find_deleted(self) -> list[Domain]:
        """Find soft-deleted domains only."""
        return [d for d in self._domains.values() if not d.is_active]

    async def save(self, domain: Domain) -> Domain:
        """Save or update a domain.

        Raises:
            ConflictError: If another active domain has the same name
        """
        existing = await self.find_by_name(domain.name)
        if existing and existing.id != domain.id:
            raise ConflictError("name", domain.name.root)
        self._domains[domain.id] = domain
        return domain

    async def soft_delete(self, domain_id: DomainId) -> int:
        """Mark a domain DELETED."""
        domain = await self.find_by_id(domain_id)
        if not domain:
            return 0
        now = utcnow()
        self._domains[domain_id] = domain.model_copy(
            update={"status": RecordStatus.DELETED, "deleted_at": now, "updated_at": now}
        )
        return 1
