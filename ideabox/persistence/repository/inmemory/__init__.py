"""In-memory repository implementations for testing."""

from .domain import InMemoryDomainRepository
from .email_token import InMemoryEmailTokenRepository
from .idea import InMemoryIdeaRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDomainRepository",
    "InMemoryEmailTokenRepository",
    "InMemoryIdeaRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
