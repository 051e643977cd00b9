"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio

from ideabox.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no services needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_submit_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
            vote = await vote_service.submit_vote(idea_id, user_id, VoteType.UP)
            assert vote.type == VoteType.UP
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for API client fixtures (E2E tests).

    The app runs against a test container, so state persists across the
    requests of one test. Use ``resolve`` to reach the test doubles.

    Usage:
        client = create_client_fixture()

        def test_health(client):
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        from fastapi.testclient import TestClient

        from ideabox.interface.api.app import create_app

        app = create_app(container=build_test_container(unmock=unmock or set()))
        # The app's lifespan closes the container on exit
        with TestClient(app) as test_client:
            yield test_client

    return _client


def resolve(client, dependency_type):
    """Fetch an APP-scoped dependency from the client's container."""
    container = client.app.state.dishka_container
    return client.portal.call(container.get, dependency_type)
