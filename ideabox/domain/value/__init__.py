"""Domain value objects for ideabox."""

from ideabox.domain.value.identifiers import DomainId, IdeaId, UserId, VoteId
from ideabox.domain.value.types import (
    AuthProvider,
    DomainName,
    EmailAddress,
    EmailTokenCode,
    OAuthProfile,
    OAuthTokens,
    Password,
    RecordStatus,
    Role,
    Username,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "DomainId",
    "IdeaId",
    "VoteId",
    # Types
    "AuthProvider",
    "DomainName",
    "EmailAddress",
    "EmailTokenCode",
    "OAuthProfile",
    "OAuthTokens",
    "Password",
    "RecordStatus",
    "Role",
    "Username",
    "VoteType",
]
