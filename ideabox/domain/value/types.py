"""Domain value objects for ideabox.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from ideabox.domain.value.common import (
    CaseInsensitiveValue,
    RootValueObject,
    ValueObject,
)


class VoteType(str, Enum):
    """Type of vote.

    REMOVED is the state a vote is toggled into when its owner repeats the
    same direction; it stays stored but no longer counts.
    """

    UP = "up"
    DOWN = "down"
    REMOVED = "removed"

    @property
    def weight(self) -> int:
        """Contribution of a vote of this type to an idea's score."""
        return _VOTE_WEIGHTS[self]


_VOTE_WEIGHTS = {VoteType.UP: 1, VoteType.DOWN: -1, VoteType.REMOVED: 0}


class RecordStatus(str, Enum):
    """Lifecycle status of a soft-deletable record.

    Every query states explicitly whether DELETED rows are included.
    """

    ACTIVE = "active"
    DELETED = "deleted"


class Role(str, Enum):
    """User roles."""

    USER = "user"
    ADMIN = "admin"
    ROOT = "root"


class AuthProvider(str, Enum):
    """External OAuth 2.0 sign-in providers.

    Each has its own provider id column on the users table.
    """

    GOOGLE = "google"
    FACEBOOK = "facebook"
    GITHUB = "github"


class OAuthTokens(ValueObject):
    """Credentials granted by a provider at sign-in."""

    access_token: str
    refresh_token: str | None = None
    code: str


class OAuthProfile(ValueObject):
    """Account details a provider returns after the code exchange."""

    provider: AuthProvider
    provider_user_id: str  # Stable id at the provider, never the e-mail
    email: str | None = None  # Not every account exposes one
    tokens: OAuthTokens


class Username(CaseInsensitiveValue):
    """Username chosen at sign up.

    4-20 characters. Uniqueness is case-insensitive (see normalized()).
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        if len(v) < 4 or len(v) > 20:
            raise ValueError("Username must be 4-20 characters")
        return v


class EmailAddress(CaseInsensitiveValue):
    """E-mail address."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate e-mail shape."""
        v = v.strip()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid e-mail address")
        return v


class Password(RootValueObject[str]):
    """A plaintext password that passed the strength policy.

    Only ever held transiently, before hashing.
    """

    @field_validator("root")
    @classmethod
    def validate_strength(cls, v: str) -> str:
        """Require 8+ chars with lowercase, uppercase, digit and symbol."""
        if len(v) < 8 or len(v) > 128:
            raise ValueError("Password must be 8-128 characters")
        if not (
            re.search(r"[a-z]", v)
            and re.search(r"[A-Z]", v)
            and re.search(r"\d", v)
            and re.search(r"[^A-Za-z0-9]", v)
        ):
            raise ValueError(
                "Password must contain a lowercase letter, an uppercase letter, "
                "a digit and a symbol"
            )
        return v

    def __str__(self) -> str:
        return "********"


class EmailTokenCode(RootValueObject[str]):
    """URL-safe e-mail token code."""

    @field_validator("root")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token code must be 1-255 characters")
        return v


class DomainName(RootValueObject[str]):
    """Fully qualified domain name, lowercased, without trailing dot."""

    @field_validator("root")
    @classmethod
    def validate_fqdn(cls, v: str) -> str:
        """Validate FQDN syntax."""
        v = v.strip().lower().rstrip(".")
        label = r"(?!-)[a-z0-9-]{1,63}(?<!-)"
        if len(v) > 253 or not re.match(rf"^({label}\.)+[a-z]{{2,63}}$", v):
            raise ValueError("Not an FQDN")
        return v
