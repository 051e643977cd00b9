"""Traefik route registry.

Traefik reads dynamic routers from its Redis key-value provider. Adding a
domain writes one router that serves the bare and www hosts over TLS.
"""

import logfire
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ideabox.config import TraefikSettings
from ideabox.domain.error import InternalFailureError
from ideabox.domain.service.domain_service import RouteRegistry


def router_keys(name: str, settings: TraefikSettings) -> dict[str, str]:
    """Traefik KV entries for a domain's router."""
    prefix = f"traefik/http/routers/{name}"
    return {
        f"{prefix}/rule": f"Host(`{name}`) || Host(`www.{name}`)",
        f"{prefix}/tls": "true",
        f"{prefix}/tls/certResolver": settings.cert_resolver,
        f"{prefix}/service": settings.service,
    }


class RedisRouteRegistry(RouteRegistry):
    """Route registry writing to Redis in a single MULTI/EXEC."""

    def __init__(self, client: Redis, settings: TraefikSettings) -> None:
        """Initialize registry.

        Args:
            client: Redis client
            settings: Traefik service and certificate resolver
        """
        self.client = client
        self.settings = settings

    async def register(self, name: str) -> None:
        """Write the router keys for a domain.

        Raises:
            InternalFailureError: If Redis is unreachable or rejected a command
        """
        with logfire.span("traefik.register", domain=name):
            try:
                async with self.client.pipeline(transaction=True) as pipe:
                    for key, value in router_keys(name, self.settings).items():
                        pipe.set(key, value)
                    results = await pipe.execute()
            except RedisError as e:
                logfire.error("Failed to write Traefik routes", domain=name, error=str(e))
                raise InternalFailureError() from e

            logfire.info("Added Traefik routes", domain=name, results=results)


class InMemoryRouteRegistry(RouteRegistry):
    """Route registry for testing, keeping keys in a dict."""

    def __init__(self, settings: TraefikSettings) -> None:
        self.settings = settings
        self.keys: dict[str, str] = {}
        self.fail = False

    async def register(self, name: str) -> None:
        """Store the router keys for a domain."""
        if self.fail:
            raise InternalFailureError()
        self.keys.update(router_keys(name, self.settings))
