"""Domain repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ideabox.domain.model.domain import Domain
from ideabox.domain.value import DomainId, DomainName, UserId


class DomainRepository(ABC):
    """Repository for Domain entity."""

    @abstractmethod
    async def find_by_id(
        self, domain_id: DomainId, include_deleted: bool = False
    ) -> Optional[Domain]:
        """Find a domain by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: DomainName) -> Optional[Domain]:
        """Find an active domain by name."""
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, include_deleted: bool = False
    ) -> List[Domain]:
        """Find the domains a user registered."""
        pass

    @abstractmethod
    async def find_all(self, include_deleted: bool = False) -> List[Domain]:
        """Find all domains."""
        pass

    @abstractmethod
    async def find_deleted(self) -> List[Domain]:
        """Find soft-deleted domains only."""
        pass

    @abstractmethod
    async def save(self, domain: Domain) -> Domain:
        """Save a domain (create or update).

        Raises:
            ConflictError: If the name is already registered
        """
        pass

    @abstractmethod
    async def soft_delete(self, domain_id: DomainId) -> int:
        """Mark a domain DELETED.

        Returns:
            Number of affected rows
        """
        pass
