"""PostgreSQL repository implementations."""

from ideabox.persistence.repository.domain import PostgresDomainRepository
from ideabox.persistence.repository.email_token import PostgresEmailTokenRepository
from ideabox.persistence.repository.idea import PostgresIdeaRepository
from ideabox.persistence.repository.user import PostgresUserRepository
from ideabox.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresDomainRepository",
    "PostgresIdeaRepository",
    "PostgresVoteRepository",
    "PostgresEmailTokenRepository",
]
