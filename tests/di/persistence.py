"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ideabox.domain.repository import (
    DomainRepository,
    EmailTokenRepository,
    IdeaRepository,
    UserRepository,
    VoteRepository,
)
from ideabox.persistence.repository.inmemory import (
    InMemoryDomainRepository,
    InMemoryEmailTokenRepository,
    InMemoryIdeaRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from ideabox.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that state survives across the requests of one test
    container; each test builds a fresh container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_domain_repository(self) -> DomainRepository:
        """Provide in-memory domain repository."""
        return InMemoryDomainRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_idea_repository(self, vote_repository: VoteRepository) -> IdeaRepository:
        """Provide in-memory idea repository ranking over the vote repository."""
        return InMemoryIdeaRepository(vote_repository)

    @provide(scope=Scope.APP)
    def get_email_token_repository(self) -> EmailTokenRepository:
        """Provide in-memory e-mail token repository."""
        return InMemoryEmailTokenRepository()
