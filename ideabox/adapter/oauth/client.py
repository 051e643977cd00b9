"""OAuth 2.0 authorization code flow for Google, Facebook and GitHub.

The browser is redirected to the provider with a ``state`` value; the
provider redirects back with a ``code``, which is exchanged for an access
token and then for the account profile.
"""

from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urlencode

import httpx
import logfire

from ideabox.config import OAuthClientSettings, OAuthSettings
from ideabox.domain.error import InternalFailureError, NotAuthorizedError, NotFoundError
from ideabox.domain.service.auth_service import OAuthClient
from ideabox.domain.value import AuthProvider, OAuthProfile, OAuthTokens


@dataclass(frozen=True)
class ProviderEndpoints:
    """Fixed endpoints and scope of one provider."""

    authorize_url: str
    token_url: str
    profile_url: str
    scope: str
    profile_params: dict[str, str] | None = None


ENDPOINTS: dict[AuthProvider, ProviderEndpoints] = {
    AuthProvider.GOOGLE: ProviderEndpoints(
        authorize_url="https://accounts.google.com/o/oauth2/v2/auth",
        token_url="https://oauth2.googleapis.com/token",
        profile_url="https://openidconnect.googleapis.com/v1/userinfo",
        scope="openid email profile",
    ),
    AuthProvider.FACEBOOK: ProviderEndpoints(
        authorize_url="https://www.facebook.com/v19.0/dialog/oauth",
        token_url="https://graph.facebook.com/v19.0/oauth/access_token",
        profile_url="https://graph.facebook.com/me",
        scope="email",
        profile_params={"fields": "id,email"},
    ),
    AuthProvider.GITHUB: ProviderEndpoints(
        authorize_url="https://github.com/login/oauth/authorize",
        token_url="https://github.com/login/oauth/access_token",
        profile_url="https://api.github.com/user",
        scope="read:user user:email",
    ),
}

GITHUB_EMAILS_URL = "https://api.github.com/user/emails"


class HttpxOAuthClient(OAuthClient):
    """OAuth client talking to the providers over httpx."""

    def __init__(
        self,
        oauth_settings: OAuthSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize OAuth client.

        Args:
            oauth_settings: Client credentials and callback base URL
            transport: httpx transport override (tests)
        """
        self.oauth_settings = oauth_settings
        self.transport = transport

    def _credentials(self, provider: AuthProvider) -> OAuthClientSettings:
        credentials: OAuthClientSettings = getattr(self.oauth_settings, provider.value)
        if not credentials.client_id or not credentials.client_secret:
            logfire.warn("OAuth provider not configured", provider=provider.value)
            raise NotFoundError("OAuth provider", provider.value)
        return credentials

    def _redirect_uri(self, provider: AuthProvider) -> str:
        return f"{self.oauth_settings.callback_base_url}/{provider.value}/callback"

    def authorization_url(self, provider: AuthProvider, state: str) -> str:
        """Build the provider's consent page URL."""
        credentials = self._credentials(provider)
        endpoints = ENDPOINTS[provider]
        params = {
            "response_type": "code",
            "client_id": credentials.client_id,
            "redirect_uri": self._redirect_uri(provider),
            "scope": endpoints.scope,
            "state": state,
        }
        return f"{endpoints.authorize_url}?{urlencode(params)}"

    async def complete_authorization(
        self, provider: AuthProvider, code: str
    ) -> OAuthProfile:
        """Exchange the code and fetch the account profile."""
        credentials = self._credentials(provider)
        endpoints = ENDPOINTS[provider]

        with logfire.span("oauth.complete_authorization", provider=provider.value):
            try:
                async with httpx.AsyncClient(
                    transport=self.transport, timeout=30.0
                ) as client:
                    grant = await self._exchange_code(
                        client, provider, credentials, endpoints, code
                    )
                    access_token = grant["access_token"]
                    profile = await self._get_json(
                        client,
                        endpoints.profile_url,
                        access_token,
                        params=endpoints.profile_params,
                    )
                    email = _PROFILE_EMAIL[provider](profile)
                    if provider is AuthProvider.GITHUB and not email:
                        email = _primary_github_email(
                            await self._get_json(client, GITHUB_EMAILS_URL, access_token)
                        )
            except httpx.HTTPError as e:
                logfire.error(
                    "OAuth provider unreachable", provider=provider.value, error=str(e)
                )
                raise InternalFailureError() from e

            provider_user_id = profile.get(_PROFILE_ID[provider])
            if not provider_user_id:
                logfire.error("OAuth profile without id", provider=provider.value)
                raise InternalFailureError()

            logfire.info(
                "OAuth profile fetched",
                provider=provider.value,
                provider_user_id=str(provider_user_id),
                has_email=bool(email),
            )
            return OAuthProfile(
                provider=provider,
                provider_user_id=str(provider_user_id),
                email=email,
                tokens=OAuthTokens(
                    access_token=access_token,
                    refresh_token=grant.get("refresh_token"),
                    code=code,
                ),
            )

    async def _exchange_code(
        self,
        client: httpx.AsyncClient,
        provider: AuthProvider,
        credentials: OAuthClientSettings,
        endpoints: ProviderEndpoints,
        code: str,
    ) -> dict[str, Any]:
        """Trade the authorization code for an access token.

        Raises:
            NotAuthorizedError: If the provider rejected the code
        """
        response = await client.post(
            endpoints.token_url,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
                "redirect_uri": self._redirect_uri(provider),
            },
            headers={"Accept": "application/json"},
        )
        if response.status_code >= 500:
            logfire.error(
                "OAuth token endpoint failed",
                provider=provider.value,
                status_code=response.status_code,
            )
            raise InternalFailureError()

        # GitHub answers 200 with an "error" field for bad codes
        grant = _json_or_empty(response) if response.status_code == 200 else {}
        if "access_token" not in grant:
            logfire.warn(
                "OAuth code rejected",
                provider=provider.value,
                status_code=response.status_code,
                error=grant.get("error") or response.text,
            )
            raise NotAuthorizedError(message="OAuth sign-in was rejected")
        return grant

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        access_token: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        response = await client.get(
            url,
            params=params,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        )
        if response.status_code != 200:
            logfire.error(
                "OAuth profile request failed",
                url=url,
                status_code=response.status_code,
            )
            raise InternalFailureError()
        try:
            return response.json()
        except ValueError as e:
            logfire.error("OAuth profile response is not JSON", url=url)
            raise InternalFailureError() from e


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


_PROFILE_ID: dict[AuthProvider, str] = {
    AuthProvider.GOOGLE: "sub",
    AuthProvider.FACEBOOK: "id",
    AuthProvider.GITHUB: "id",
}


def _google_email(profile: dict[str, Any]) -> str | None:
    # Only verified addresses may link to an existing account
    return profile.get("email") if profile.get("email_verified") else None


_PROFILE_EMAIL: dict[AuthProvider, Callable[[dict[str, Any]], str | None]] = {
    AuthProvider.GOOGLE: _google_email,
    AuthProvider.FACEBOOK: lambda profile: profile.get("email"),
    AuthProvider.GITHUB: lambda profile: profile.get("email"),
}


def _primary_github_email(emails: list[dict[str, Any]]) -> str | None:
    """Primary verified address from GitHub's /user/emails."""
    for entry in emails:
        if entry.get("primary") and entry.get("verified"):
            return entry.get("email")
    return None


class StaticOAuthClient(OAuthClient):
    """OAuth client for testing.

    Codes map to the profiles registered with ``add``; any other code is
    rejected like a provider would.
    """

    def __init__(self) -> None:
        self.profiles: dict[str, OAuthProfile] = {}

    def add(
        self,
        code: str,
        provider: AuthProvider,
        provider_user_id: str,
        email: str | None = None,
    ) -> OAuthProfile:
        """Register the profile a code exchanges into."""
        profile = OAuthProfile(
            provider=provider,
            provider_user_id=provider_user_id,
            email=email,
            tokens=OAuthTokens(access_token=f"access-{code}", code=code),
        )
        self.profiles[code] = profile
        return profile

    def authorization_url(self, provider: AuthProvider, state: str) -> str:
        """Fake consent page URL."""
        return f"https://{provider.value}.test/authorize?{urlencode({'state': state})}"

    async def complete_authorization(
        self, provider: AuthProvider, code: str
    ) -> OAuthProfile:
        """Look up the registered profile."""
        profile = self.profiles.get(code)
        if not profile or profile.provider is not provider:
            raise NotAuthorizedError(message="OAuth sign-in was rejected")
        return profile
