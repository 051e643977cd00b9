"""User aggregate root.

Users sign up with a password or through an OAuth provider, verify their
e-mail address through a single-use token, and own domains, ideas and votes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ideabox.domain.model.common import SoftDeletableModel, utcnow
from ideabox.domain.value import AuthProvider, OAuthProfile, OAuthTokens, Role, UserId


class User(SoftDeletableModel):
    """User aggregate root."""

    id: UserId
    username: str
    normalized_username: str
    email: str
    normalized_email: str
    has_verified_email: bool = False
    password_hash: Optional[str] = None
    roles: list[Role] = Field(default_factory=lambda: [Role.USER])
    provider_ids: dict[AuthProvider, str] = Field(default_factory=dict)
    oauth_tokens: dict[AuthProvider, OAuthTokens] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def is_admin(self) -> bool:
        """Admins and root users may modify records they don't own."""
        return Role.ADMIN in self.roles or Role.ROOT in self.roles

    def link_provider(self, profile: OAuthProfile) -> "User":
        """Copy of this user with the provider id and tokens of ``profile``.

        Other providers stay linked. Tokens of the same provider are replaced.
        """
        provider_ids = {**self.provider_ids, profile.provider: profile.provider_user_id}
        oauth_tokens = {**self.oauth_tokens, profile.provider: profile.tokens}
        return self.model_copy(
            update={
                "provider_ids": provider_ids,
                "oauth_tokens": oauth_tokens,
                "updated_at": utcnow(),
            }
        )

    def can_modify(self, owner_id: UserId) -> bool:
        """Ownership rule: same user id, or an elevated role."""
        return owner_id == self.id or self.is_admin()
