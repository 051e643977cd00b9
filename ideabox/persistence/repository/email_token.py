"""PostgreSQL implementation of EmailToken repository."""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.domain.model import EmailToken
from ideabox.domain.repository import EmailTokenRepository
from ideabox.domain.value import EmailTokenCode
from ideabox.persistence.error import translate_errors
from ideabox.persistence.mappers import email_token_to_dict, row_to_email_token
from ideabox.persistence.tables import email_tokens_table


class PostgresEmailTokenRepository(EmailTokenRepository):
    """PostgreSQL implementation of EmailTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_code(self, code: EmailTokenCode) -> Optional[EmailToken]:
        """Find a token by its code."""
        stmt = select(email_tokens_table).where(email_tokens_table.c.code == code.root)
        with translate_errors("email_tokens.select"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_email_token(dict(row)) if row else None

    async def create(self, token: EmailToken) -> EmailToken:
        """Insert a new token."""
        stmt = insert(email_tokens_table).values(**email_token_to_dict(token))
        with translate_errors("email_tokens.create"):
            await self.session.execute(stmt)
            await self.session.flush()
        return token

    async def delete(self, code: EmailTokenCode) -> bool:
        """Delete a token; the row lock makes concurrent deletes see 0 rows."""
        stmt = delete(email_tokens_table).where(email_tokens_table.c.code == code.root)
        with translate_errors("email_tokens.delete"):
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
