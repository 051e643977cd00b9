"""OAuth infrastructure providers."""

from dishka import Scope, provide

from ideabox.adapter.oauth import HttpxOAuthClient
from ideabox.config import OAuthSettings
from ideabox.domain.service import OAuthClient
from ideabox.util.di.base import ProviderBase


class OAuthProvider(ProviderBase):
    """OAuth component base."""

    __mock_component__ = "oauth"


class ProdOAuthProvider(OAuthProvider):
    """Production OAuth provider (Google, Facebook, GitHub over httpx)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_oauth_client(self, oauth_settings: OAuthSettings) -> OAuthClient:
        """Provide OAuth client; providers without credentials answer 404."""
        return HttpxOAuthClient(oauth_settings)
