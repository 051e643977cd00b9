"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ideabox.domain.model.user import User
from ideabox.domain.value import AuthProvider, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            include_deleted: Whether soft-deleted users are returned

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_normalized_username(
        self, normalized_username: str
    ) -> Optional[User]:
        """Find an active user by lowercased username."""
        pass

    @abstractmethod
    async def find_by_normalized_email(self, normalized_email: str) -> Optional[User]:
        """Find an active user by normalized e-mail."""
        pass

    @abstractmethod
    async def find_by_provider_id(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[User]:
        """Find the active user linked to an OAuth provider account.

        Args:
            provider: OAuth provider
            provider_user_id: The account's id at that provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, include_deleted: bool = False) -> List[User]:
        """Find all users."""
        pass

    @abstractmethod
    async def find_deleted(self) -> List[User]:
        """Find soft-deleted users only."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If username or e-mail is already taken
        """
        pass

    @abstractmethod
    async def soft_delete(self, user_id: UserId) -> int:
        """Mark a user DELETED.

        Returns:
            Number of affected rows
        """
        pass
