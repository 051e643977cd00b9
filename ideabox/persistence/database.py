"""Async engine and session factory for the ideabox database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ideabox.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for ``DATABASE__URL``.

    Connections report the service name as their Postgres
    ``application_name``, so they can be told apart in ``pg_stat_activity``.
    SQL is echoed when ``DEBUG`` is set.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={
            "server_settings": {
                "application_name": settings.observability.service_name
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions for one request each; committed by the DI provider."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
