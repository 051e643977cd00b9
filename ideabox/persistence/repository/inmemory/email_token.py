"""In-memory e-mail token repository for testing."""

from typing import Optional

from ideabox.domain.model.email_token import EmailToken
from ideabox.domain.repository.email_token import EmailTokenRepository
from ideabox.domain.value import EmailTokenCode


class InMemoryEmailTokenRepository(EmailTokenRepository):
    """In-memory implementation of EmailTokenRepository for testing."""

    def __init__(self) -> None:
        self._tokens: dict[str, EmailToken] = {}

    async def find_by_code(self, code: EmailTokenCode) -> Optional[EmailToken]:
        """Find a token by its code."""
        return self._tokens.get(code.root)

    async def create(self, token: EmailToken) -> EmailToken:
        """Insert a new token."""
        self._tokens[token.code.root] = token
        return token

    async def delete(self, code: EmailTokenCode) -> bool:
        """Delete a token, reporting whether it was still there."""
        return self._tokens.pop(code.root, None) is not None
