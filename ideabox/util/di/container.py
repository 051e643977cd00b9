"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ideabox.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation registered."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__
        and any(impl.__is_mock__ for impl in base.__subclasses__())
    }


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the container.

    Every component uses its production implementation unless named in
    ``mocked``. Mock implementations register themselves by subclassing
    the component base, so they must be imported first (see tests.di).

    Raises:
        ValueError: If a named component is unknown
    """
    mocked = set(mocked)
    unknown = mocked - {base.__mock_component__ for base in PROVIDERS}
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    provider_instances = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    # FastapiProvider exposes the Request to REQUEST-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app (``app.state.dishka_container``)."""
    setup_dishka(container, app)
