"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ideabox.config import Settings
from ideabox.domain.repository import (
    DomainRepository,
    EmailTokenRepository,
    IdeaRepository,
    UserRepository,
    VoteRepository,
)
from ideabox.persistence.database import create_engine, create_session_factory
from ideabox.persistence.repository import (
    PostgresDomainRepository,
    PostgresEmailTokenRepository,
    PostgresIdeaRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from ideabox.util.di.base import ProviderBase
from ideabox.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app shuts down."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_domain_repository(self, session: AsyncSession) -> DomainRepository:
        """Provide Domain repository."""
        return PostgresDomainRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_idea_repository(self, session: AsyncSession) -> IdeaRepository:
        """Provide Idea repository."""
        return PostgresIdeaRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_email_token_repository(
        self, session: AsyncSession
    ) -> EmailTokenRepository:
        """Provide EmailToken repository."""
        return PostgresEmailTokenRepository(session)
