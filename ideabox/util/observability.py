"""Logfire setup.

Services log and trace with ``logfire`` directly, e.g.::

    with logfire.span("vote_service.submit_vote", idea_id=str(idea_id)):
        logfire.info("Vote created", vote_id=str(vote.id), type=vote.type.value)

This module configures the exporter once per process and instruments the
three libraries the app talks through: FastAPI, SQLAlchemy and httpx.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ideabox.config import Settings

# Paths that are never traced
EXCLUDED_URLS = ["/health"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Console output is always on. Export to Logfire cloud follows
    OBSERVABILITY__SEND_TO_LOGFIRE, and defaults to whether a token is set.
    The service version is the deployed git SHA.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=observability.service_name,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        service_name=observability.service_name,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health checks."""
    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        excluded_urls=EXCLUDED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, with span context added as SQL comments."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to SendGrid, Segment and the OAuth providers."""
    logfire.instrument_httpx()
