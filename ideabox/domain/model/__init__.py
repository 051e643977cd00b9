"""Domain model entities for ideabox."""

from ideabox.domain.model.domain import Domain
from ideabox.domain.model.email_token import EmailToken
from ideabox.domain.model.idea import Idea, RankedIdea
from ideabox.domain.model.user import User
from ideabox.domain.model.vote import Vote

__all__ = [
    "User",
    "Domain",
    "Idea",
    "RankedIdea",
    "Vote",
    "EmailToken",
]
