"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ideabox.domain.model import Domain, EmailToken, Idea, RankedIdea, User, Vote
from ideabox.domain.value import (
    AuthProvider,
    DomainId,
    DomainName,
    EmailTokenCode,
    IdeaId,
    OAuthTokens,
    RecordStatus,
    Role,
    UserId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _status_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "status": RecordStatus(row["status"]),
        "deleted_at": row.get("deleted_at"),
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        normalized_username=row["normalized_username"],
        email=row["email"],
        normalized_email=row["normalized_email"],
        has_verified_email=row["has_verified_email"],
        password_hash=row.get("password_hash"),
        roles=[Role(role) for role in row["roles"]],
        provider_ids={
            provider: row[provider.value]
            for provider in AuthProvider
            if row.get(provider.value)
        },
        oauth_tokens={
            AuthProvider(provider): OAuthTokens(**tokens)
            for provider, tokens in (row.get("tokens") or {}).items()
        },
        **_status_fields(row),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(mode="python", exclude={"provider_ids", "oauth_tokens"})
    data["roles"] = [role.value for role in user.roles]
    for provider in AuthProvider:
        data[provider.value] = user.provider_ids.get(provider)
    data["tokens"] = {
        provider.value: tokens.model_dump(mode="json")
        for provider, tokens in user.oauth_tokens.items()
    } or None
    data["status"] = user.status.value
    return data


def row_to_domain(row: Dict[str, Any]) -> Domain:
    """Convert database row to Domain domain model."""
    return Domain(
        id=DomainId(_uuid(row["id"])),
        name=DomainName(row["name"]),
        user_id=UserId(_uuid(row["user_id"])),
        has_verified_dns=row["has_verified_dns"],
        last_verified_dns=row.get("last_verified_dns"),
        **_status_fields(row),
    )


def domain_to_dict(domain: Domain) -> Dict[str, Any]:
    """Convert Domain domain model to database dict."""
    data = domain.model_dump(mode="python")
    data["name"] = domain.name.root
    data["status"] = domain.status.value
    return data


def row_to_idea(row: Dict[str, Any]) -> Idea:
    """Convert database row to Idea domain model."""
    return Idea(
        id=IdeaId(_uuid(row["id"])),
        headline=row["headline"],
        description=row.get("description"),
        user_id=UserId(_uuid(row["user_id"])),
        domain_id=DomainId(_uuid(row["domain_id"])),
        **_status_fields(row),
    )


def row_to_ranked_idea(row: Dict[str, Any]) -> RankedIdea:
    """Convert a ranking query row (idea columns plus score)."""
    idea = row_to_idea(row)
    return RankedIdea(**idea.model_dump(), score=int(row["score"]))


def idea_to_dict(idea: Idea) -> Dict[str, Any]:
    """Convert Idea domain model to database dict."""
    data = idea.model_dump(mode="python")
    data["status"] = idea.status.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        idea_id=IdeaId(_uuid(row["idea_id"])),
        type=VoteType(row["type"]),
        **_status_fields(row),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    data = vote.model_dump(mode="python")
    data["type"] = vote.type.value
    data["status"] = vote.status.value
    return data


def row_to_email_token(row: Dict[str, Any]) -> EmailToken:
    """Convert database row to EmailToken domain model."""
    return EmailToken(
        code=EmailTokenCode(row["code"]),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def email_token_to_dict(token: EmailToken) -> Dict[str, Any]:
    """Convert EmailToken domain model to database dict."""
    return {
        "code": token.code.root,
        "user_id": token.user_id,
        "created_at": token.created_at,
    }
