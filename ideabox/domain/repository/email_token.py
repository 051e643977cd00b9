"""E-mail token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ideabox.domain.model.email_token import EmailToken
from ideabox.domain.value import EmailTokenCode


class EmailTokenRepository(ABC):
    """Repository for EmailToken entity."""

    @abstractmethod
    async def find_by_code(self, code: EmailTokenCode) -> Optional[EmailToken]:
        """Find a token by its code.

        Args:
            code: The token code

        Returns:
            The token if it still exists, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, token: EmailToken) -> EmailToken:
        """Insert a new token."""
        pass

    @abstractmethod
    async def delete(self, code: EmailTokenCode) -> bool:
        """Delete a token (hard delete).

        This is a compare-and-delete: only one of several concurrent callers
        sees True for the same code.

        Args:
            code: The token code

        Returns:
            True if a row was removed, False if it was already gone
        """
        pass
