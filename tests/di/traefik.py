"""Mock Traefik providers for testing."""

from dishka import Scope, provide

from ideabox.adapter.traefik import InMemoryRouteRegistry
from ideabox.config import TraefikSettings
from ideabox.domain.service import RouteRegistry
from ideabox.util.di.infrastructure.traefik import TraefikProvider


class MockTraefikProvider(TraefikProvider):
    """Mock Traefik provider keeping router keys in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_registry(
        self, traefik_settings: TraefikSettings
    ) -> InMemoryRouteRegistry:
        """Provide in-memory registry (for assertions)."""
        return InMemoryRouteRegistry(traefik_settings)

    @provide(scope=Scope.APP)
    def get_route_registry(self, registry: InMemoryRouteRegistry) -> RouteRegistry:
        """Provide the in-memory registry as the domain's RouteRegistry."""
        return registry
