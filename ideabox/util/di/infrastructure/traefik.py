"""Traefik infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from redis.asyncio import Redis

from ideabox.adapter.traefik import RedisRouteRegistry
from ideabox.config import Settings, TraefikSettings
from ideabox.domain.service import RouteRegistry
from ideabox.util.di.base import ProviderBase


class TraefikProvider(ProviderBase):
    """Traefik component base."""

    __mock_component__ = "traefik"


class ProdTraefikProvider(TraefikProvider):
    """Production Traefik provider writing routes to Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterator[Redis]:
        """Provide Redis client, closed when the app shuts down."""
        client = Redis.from_url(settings.redis.url, decode_responses=True)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_route_registry(
        self, client: Redis, traefik_settings: TraefikSettings
    ) -> RouteRegistry:
        """Provide Redis-backed route registry."""
        return RedisRouteRegistry(client, traefik_settings)
