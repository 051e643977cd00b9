"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .domain_service import DNSResolver, DomainService, RouteRegistry
from .email_service import EmailMessage, EmailSender, EmailService
from .email_token_service import EmailTokenService
from .idea_service import IdeaService
from .jwt_service import JWTService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "DNSResolver",
    "DomainService",
    "EmailMessage",
    "EmailSender",
    "EmailService",
    "EmailTokenService",
    "IdeaService",
    "JWTService",
    "OAuthClient",
    "RouteRegistry",
    "Service",
    "UserService",
    "VoteService",
]
