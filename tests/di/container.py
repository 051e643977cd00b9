"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from ideabox.util.di import Component
from ideabox.util.di.container import create_container, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Unmocked components need their services running (Postgres for
    ``persistence``, Redis for ``traefik``). Settings are loaded from
    environment variables.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})

        # Real persistence and route registry
        container = build_test_container(unmock={"persistence", "traefik"})
    """
    unmock = unmock or set()
    components = mockable_components()

    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return create_container(mocked=components - unmock)
