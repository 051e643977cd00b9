"""Unit tests for the httpx OAuth client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from ideabox.adapter.oauth import HttpxOAuthClient
from ideabox.config import OAuthClientSettings, OAuthSettings
from ideabox.domain.error import InternalFailureError, NotAuthorizedError, NotFoundError
from ideabox.domain.value import AuthProvider


def _settings() -> OAuthSettings:
    return OAuthSettings(
        github=OAuthClientSettings(client_id="gh-client", client_secret="gh-secret"),
        google=OAuthClientSettings(client_id="g-client", client_secret="g-secret"),
        callback_base_url="https://api.example.com/auth",
    )


class FakeProvider:
    """Answers token and profile requests, recording what it was sent."""

    def __init__(self, routes: dict[str, httpx.Response]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes[f"{request.url.host}{request.url.path}"]


class TestAuthorizationUrl:
    """Tests for the consent page URL."""

    def test_url_carries_client_callback_and_state(self):
        client = HttpxOAuthClient(_settings())

        url = urlparse(client.authorization_url(AuthProvider.GITHUB, "state-1"))
        params = parse_qs(url.query)

        assert url.netloc == "github.com"
        assert params["client_id"] == ["gh-client"]
        assert params["redirect_uri"] == ["https://api.example.com/auth/github/callback"]
        assert params["state"] == ["state-1"]
        assert params["response_type"] == ["code"]

    def test_unconfigured_provider_is_not_found(self):
        client = HttpxOAuthClient(_settings())

        with pytest.raises(NotFoundError):
            client.authorization_url(AuthProvider.FACEBOOK, "state-1")


class TestCompleteAuthorization:
    """Tests for the code exchange."""

    @pytest.mark.asyncio
    async def test_github_falls_back_to_primary_email(self):
        """A private GitHub e-mail is read from /user/emails."""
        # Arrange
        provider = FakeProvider(
            {
                "github.com/login/oauth/access_token": httpx.Response(
                    200, json={"access_token": "tok", "token_type": "bearer"}
                ),
                "api.github.com/user": httpx.Response(
                    200, json={"id": 42, "login": "alice", "email": None}
                ),
                "api.github.com/user/emails": httpx.Response(
                    200,
                    json=[
                        {"email": "old@example.com", "primary": False, "verified": True},
                        {"email": "alice@example.com", "primary": True, "verified": True},
                    ],
                ),
            }
        )
        client = HttpxOAuthClient(_settings(), transport=httpx.MockTransport(provider))

        # Act
        profile = await client.complete_authorization(AuthProvider.GITHUB, "the-code")

        # Assert
        assert profile.provider is AuthProvider.GITHUB
        assert profile.provider_user_id == "42"
        assert profile.email == "alice@example.com"
        assert profile.tokens.access_token == "tok"
        assert profile.tokens.refresh_token is None
        assert profile.tokens.code == "the-code"

        form = parse_qs(provider.requests[0].content.decode())
        assert form["code"] == ["the-code"]
        assert form["client_secret"] == ["gh-secret"]
        assert provider.requests[1].headers["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_github_error_body_is_rejection(self):
        provider = FakeProvider(
            {
                "github.com/login/oauth/access_token": httpx.Response(
                    200, json={"error": "bad_verification_code"}
                ),
            }
        )
        client = HttpxOAuthClient(_settings(), transport=httpx.MockTransport(provider))

        with pytest.raises(NotAuthorizedError):
            await client.complete_authorization(AuthProvider.GITHUB, "stale")

    @pytest.mark.asyncio
    async def test_google_unverified_email_is_dropped(self):
        provider = FakeProvider(
            {
                "oauth2.googleapis.com/token": httpx.Response(
                    200, json={"access_token": "tok", "refresh_token": "ref"}
                ),
                "openidconnect.googleapis.com/v1/userinfo": httpx.Response(
                    200,
                    json={
                        "sub": "1057",
                        "email": "alice@example.com",
                        "email_verified": False,
                    },
                ),
            }
        )
        client = HttpxOAuthClient(_settings(), transport=httpx.MockTransport(provider))

        profile = await client.complete_authorization(AuthProvider.GOOGLE, "code")

        assert profile.provider_user_id == "1057"
        assert profile.email is None
        assert profile.tokens.refresh_token == "ref"

    @pytest.mark.asyncio
    async def test_unreachable_provider_is_internal_failure(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpxOAuthClient(_settings(), transport=httpx.MockTransport(refuse))

        with pytest.raises(InternalFailureError):
            await client.complete_authorization(AuthProvider.GITHUB, "code")
