"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from ideabox.config import (
    AnalyticsSettings,
    AuthSettings,
    DEFAULT_JWT_SECRET,
    EmailSettings,
    FrontendSettings,
    OAuthSettings,
    Settings,
    TraefikSettings,
)
from ideabox.util.di.base import ProviderBase
from ideabox.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Services depend on the section they need rather than on Settings.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if settings.is_production and settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide e-mail settings."""
        return settings.email

    @provide
    def provide_frontend_settings(self, settings: Settings) -> FrontendSettings:
        """Provide frontend link settings."""
        return settings.frontend

    @provide
    def provide_oauth_settings(self, settings: Settings) -> OAuthSettings:
        """Provide OAuth provider settings."""
        return settings.oauth

    @provide
    def provide_traefik_settings(self, settings: Settings) -> TraefikSettings:
        """Provide Traefik settings."""
        return settings.traefik

    @provide
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        """Provide analytics settings."""
        return settings.analytics
