"""Traefik routing adapter."""

from .registry import InMemoryRouteRegistry, RedisRouteRegistry, router_keys

__all__ = ["RedisRouteRegistry", "InMemoryRouteRegistry", "router_keys"]
