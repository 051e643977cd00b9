"""Domain layer DI providers."""

from dishka import Scope, provide

from ideabox.config import AuthSettings, EmailSettings, FrontendSettings, TraefikSettings
from ideabox.domain.event import EventPublisher
from ideabox.domain.repository import (
    DomainRepository,
    EmailTokenRepository,
    IdeaRepository,
    UserRepository,
    VoteRepository,
)
from ideabox.domain.service import (
    AuthService,
    DNSResolver,
    DomainService,
    EmailSender,
    EmailService,
    EmailTokenService,
    IdeaService,
    JWTService,
    OAuthClient,
    RouteRegistry,
    UserService,
    VoteService,
)
from ideabox.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_email_token_service(
        self,
        email_token_repository: EmailTokenRepository,
        user_repository: UserRepository,
        email_settings: EmailSettings,
    ) -> EmailTokenService:
        """Provide e-mail token domain service."""
        return EmailTokenService(
            email_token_repository=email_token_repository,
            user_repository=user_repository,
            email_settings=email_settings,
        )

    @provide
    def get_email_service(
        self,
        email_sender: EmailSender,
        email_settings: EmailSettings,
        frontend_settings: FrontendSettings,
    ) -> EmailService:
        """Provide e-mail rendering domain service."""
        return EmailService(
            email_sender=email_sender,
            email_settings=email_settings,
            frontend_settings=frontend_settings,
        )

    @provide
    def get_auth_service(
        self,
        user_service: UserService,
        email_token_service: EmailTokenService,
        email_service: EmailService,
        oauth_client: OAuthClient,
        event_publisher: EventPublisher,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_service=user_service,
            email_token_service=email_token_service,
            email_service=email_service,
            oauth_client=oauth_client,
            event_publisher=event_publisher,
        )

    @provide
    def get_domain_service(
        self,
        domain_repository: DomainRepository,
        dns_resolver: DNSResolver,
        route_registry: RouteRegistry,
        event_publisher: EventPublisher,
        traefik_settings: TraefikSettings,
    ) -> DomainService:
        """Provide domain (website) domain service."""
        return DomainService(
            domain_repository=domain_repository,
            dns_resolver=dns_resolver,
            route_registry=route_registry,
            event_publisher=event_publisher,
            traefik_settings=traefik_settings,
        )

    @provide
    def get_idea_service(
        self,
        idea_repository: IdeaRepository,
        domain_service: DomainService,
        event_publisher: EventPublisher,
    ) -> IdeaService:
        """Provide idea domain service."""
        return IdeaService(
            idea_repository=idea_repository,
            domain_service=domain_service,
            event_publisher=event_publisher,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        idea_service: IdeaService,
        event_publisher: EventPublisher,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            idea_service=idea_service,
            event_publisher=event_publisher,
        )
