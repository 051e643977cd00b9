"""Mock OAuth providers for testing."""

from dishka import Scope, provide

from ideabox.adapter.oauth import StaticOAuthClient
from ideabox.domain.service import OAuthClient
from ideabox.util.di.infrastructure.oauth import OAuthProvider


class MockOAuthProvider(OAuthProvider):
    """Mock OAuth provider exchanging codes registered by the test."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_static_client(self) -> StaticOAuthClient:
        """Provide static client (tests register codes with ``add``)."""
        return StaticOAuthClient()

    @provide(scope=Scope.APP)
    def get_oauth_client(self, client: StaticOAuthClient) -> OAuthClient:
        """Provide the static client as the domain's OAuthClient."""
        return client
