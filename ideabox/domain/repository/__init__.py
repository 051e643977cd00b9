"""Repository interfaces for ideabox domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ideabox.domain.repository.domain import DomainRepository
from ideabox.domain.repository.email_token import EmailTokenRepository
from ideabox.domain.repository.idea import IdeaRepository
from ideabox.domain.repository.user import UserRepository
from ideabox.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "DomainRepository",
    "IdeaRepository",
    "VoteRepository",
    "EmailTokenRepository",
]
