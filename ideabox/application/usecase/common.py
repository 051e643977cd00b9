"""Response models shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from ideabox.domain.model import Domain, Idea, RankedIdea, User, Vote
from ideabox.domain.value import AuthProvider, RecordStatus, Role, VoteType


class UserInfo(BaseModel):
    """Public view of a user. Never includes the password hash."""

    user_id: str
    username: str
    email: str
    has_verified_email: bool
    roles: list[Role]
    providers: list[AuthProvider] = []  # Linked OAuth providers, never their tokens
    status: RecordStatus
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=str(user.id),
            username=user.username,
            email=user.email,
            has_verified_email=user.has_verified_email,
            roles=list(user.roles),
            providers=sorted(user.provider_ids),
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
            deleted_at=user.deleted_at,
        )


class DomainInfo(BaseModel):
    """Domain details."""

    domain_id: str
    name: str
    user_id: str
    has_verified_dns: bool
    last_verified_dns: datetime | None
    status: RecordStatus
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_domain(cls, domain: Domain) -> "DomainInfo":
        return cls(
            domain_id=str(domain.id),
            name=domain.name.root,
            user_id=str(domain.user_id),
            has_verified_dns=domain.has_verified_dns,
            last_verified_dns=domain.last_verified_dns,
            status=domain.status,
            created_at=domain.created_at,
            updated_at=domain.updated_at,
            deleted_at=domain.deleted_at,
        )


class IdeaInfo(BaseModel):
    """Idea details."""

    idea_id: str
    headline: str
    description: str | None
    user_id: str
    domain_id: str
    status: RecordStatus
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_idea(cls, idea: Idea) -> "IdeaInfo":
        return cls(
            idea_id=str(idea.id),
            headline=idea.headline,
            description=idea.description,
            user_id=str(idea.user_id),
            domain_id=str(idea.domain_id),
            status=idea.status,
            created_at=idea.created_at,
            updated_at=idea.updated_at,
            deleted_at=idea.deleted_at,
        )


class RankedIdeaInfo(IdeaInfo):
    """Idea with its vote score."""

    score: int

    @classmethod
    def from_ranked_idea(cls, idea: RankedIdea) -> "RankedIdeaInfo":
        return cls(**IdeaInfo.from_idea(idea).model_dump(), score=idea.score)


class VoteInfo(BaseModel):
    """Vote details."""

    vote_id: str
    user_id: str
    idea_id: str
    type: VoteType
    status: RecordStatus
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteInfo":
        return cls(
            vote_id=str(vote.id),
            user_id=str(vote.user_id),
            idea_id=str(vote.idea_id),
            type=vote.type,
            status=vote.status,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
            deleted_at=vote.deleted_at,
        )
