"""Test configuration and shared helpers."""

from ideabox.domain.model import Domain, Idea, User
from ideabox.domain.repository import UserRepository
from ideabox.domain.service import DomainService, IdeaService, UserService
from ideabox.domain.value import EmailAddress, Password, Role, Username

PASSWORD = "S3cure!pass"


async def make_user(
    user_service: UserService, username: str = "alice", email: str | None = None
) -> User:
    """Create a user with the shared test password."""
    return await user_service.create_with_password(
        Username(username),
        EmailAddress(email or f"{username}@example.com"),
        Password(PASSWORD),
    )


async def make_admin(user_repository: UserRepository, user: User) -> User:
    """Grant the ADMIN role to an existing user."""
    return await user_repository.save(
        user.model_copy(update={"roles": [Role.USER, Role.ADMIN]})
    )


async def make_domain(
    domain_service: DomainService, owner: User, name: str = "example.com"
) -> Domain:
    """Register a domain (the mock resolver points every host at Traefik)."""
    return await domain_service.create_domain(owner, name)


async def make_idea(
    idea_service: IdeaService,
    author: User,
    domain: Domain,
    headline: str = "Dark mode",
    description: str | None = None,
) -> Idea:
    """Post an idea on a domain."""
    return await idea_service.create_idea(author, domain.id, headline, description)
