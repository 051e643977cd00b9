"""OAuth 2.0 sign-in adapter."""

from .client import HttpxOAuthClient, StaticOAuthClient

__all__ = ["HttpxOAuthClient", "StaticOAuthClient"]
