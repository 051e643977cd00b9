"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ideabox.domain.model.vote import Vote
from ideabox.domain.value import IdeaId, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, vote_id: VoteId, include_deleted: bool = False
    ) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier
            include_deleted: Whether soft-deleted votes are returned

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_user_and_idea(
        self, user_id: UserId, idea_id: IdeaId
    ) -> Optional[Vote]:
        """Find a user's active vote on an idea.

        Args:
            user_id: The user's ID
            idea_id: The idea's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_idea(
        self, idea_id: IdeaId, include_deleted: bool = False
    ) -> List[Vote]:
        """Find all votes on an idea."""
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, include_deleted: bool = False
    ) -> List[Vote]:
        """Find all votes by a user."""
        pass

    @abstractmethod
    async def find_all(self, include_deleted: bool = False) -> List[Vote]:
        """Find all votes."""
        pass

    @abstractmethod
    async def find_deleted(self) -> List[Vote]:
        """Find soft-deleted votes only."""
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            ConflictError: If the user already holds an active vote on the idea
        """
        pass

    @abstractmethod
    async def update(self, vote: Vote) -> Vote:
        """Persist changes to an existing vote.

        Args:
            vote: The vote to update

        Returns:
            The saved vote
        """
        pass

    @abstractmethod
    async def soft_delete(self, vote_id: VoteId) -> int:
        """Mark a vote DELETED.

        Args:
            vote_id: The vote ID to delete

        Returns:
            Number of affected rows
        """
        pass
