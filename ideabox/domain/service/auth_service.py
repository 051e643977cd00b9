"""Authentication domain service."""

import logfire

from ideabox.domain.event import EventPublisher, UserSignedUp
from ideabox.domain.model import User
from ideabox.domain.value import (
    AuthProvider,
    EmailAddress,
    EmailTokenCode,
    OAuthProfile,
    Password,
    Username,
)

from .base import Service
from .email_service import EmailService
from .email_token_service import EmailTokenService
from .user_service import UserService


class OAuthClient:
    """OAuth 2.0 authorization code flow against external providers."""

    def authorization_url(self, provider: AuthProvider, state: str) -> str:
        """Build the provider URL the browser is sent to.

        Args:
            provider: OAuth provider
            state: Opaque value echoed back to the callback (CSRF protection)

        Returns:
            Authorization URL

        Raises:
            NotFoundError: If the provider is not configured
        """
        raise NotImplementedError

    async def complete_authorization(
        self, provider: AuthProvider, code: str
    ) -> OAuthProfile:
        """Exchange a callback code for tokens and the account profile.

        Raises:
            NotFoundError: If the provider is not configured
            NotAuthorizedError: If the provider rejected the code
            InternalFailureError: If the provider could not be reached
        """
        raise NotImplementedError


class AuthService(Service):
    """Password and OAuth sign up, and the e-mail token flows built on them.

    Verification and password reset share one token mechanism: a code is
    issued, mailed as a frontend link, and redeemed once.
    """

    def __init__(
        self,
        user_service: UserService,
        email_token_service: EmailTokenService,
        email_service: EmailService,
        oauth_client: OAuthClient,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            email_token_service: Token issue and redeem
            email_service: Verification and reset e-mails
            oauth_client: Code exchange with OAuth providers
            event_publisher: Outbound channel for UserSignedUp events
        """
        self.user_service = user_service
        self.email_token_service = email_token_service
        self.email_service = email_service
        self.oauth_client = oauth_client
        self.event_publisher = event_publisher

    async def sign_up(
        self, username: Username, email: EmailAddress, password: Password
    ) -> User:
        """Create an account and send its verification e-mail.

        Raises:
            ConflictError: If username or e-mail is already taken
            InternalFailureError: If the e-mail could not be sent
        """
        with logfire.span("auth_service.sign_up", username=username.root):
            user = await self.user_service.create_with_password(username, email, password)
            await self.send_verification(user)

            self.event_publisher.publish(UserSignedUp(user=user))
            return user

    async def sign_in(self, username: str, password: str) -> User:
        """Check credentials.

        Raises:
            NotAuthorizedError: If the credentials are wrong
        """
        with logfire.span("auth_service.sign_in", username=username):
            user = await self.user_service.authenticate(username, password)
            logfire.info("User signed in", user_id=str(user.id))
            return user

    def start_oauth(self, provider: AuthProvider, state: str) -> str:
        """Authorization URL for an OAuth sign-in."""
        logfire.info("OAuth sign-in started", provider=provider.value)
        return self.oauth_client.authorization_url(provider, state)

    async def sign_in_with_oauth(self, provider: AuthProvider, code: str) -> User:
        """Finish an OAuth sign-in.

        Known accounts sign in, an e-mail match links the provider, and
        anything else becomes a new account. New accounts get a verification
        e-mail and a Signed Up event, like a password sign up.

        Raises:
            NotAuthorizedError: If the provider rejected the code
            ValidationError: If a new account is needed but there is no e-mail
            InternalFailureError: If the provider or the mailer failed
        """
        with logfire.span("auth_service.sign_in_with_oauth", provider=provider.value):
            profile = await self.oauth_client.complete_authorization(provider, code)
            user, created = await self.user_service.find_or_create_by_oauth(profile)
            if created:
                await self.send_verification(user)
                self.event_publisher.publish(UserSignedUp(user=user))
            logfire.info(
                "User signed in with OAuth",
                user_id=str(user.id),
                provider=provider.value,
                created=created,
            )
            return user

    async def send_verification(self, user: User) -> None:
        """Issue a token and mail the verification link."""
        code = await self.email_token_service.issue(user)
        await self.email_service.send_verification_email(user, code)

    async def resend_verification(self, email: str) -> None:
        """Send a new verification link.

        Unknown addresses succeed silently.
        """
        with logfire.span("auth_service.resend_verification"):
            user = await self.user_service.get_user_by_email(email)
            if not user:
                return
            await self.send_verification(user)

    async def verify_email(self, code: EmailTokenCode) -> User:
        """Redeem a verification token.

        Raises:
            NotFoundError: If the token doesn't exist or was already used
            TokenExpiredError: If the token has expired
        """
        with logfire.span("auth_service.verify_email"):
            user = await self.email_token_service.redeem(code)
            logfire.info("E-mail verified", user_id=str(user.id))
            return user

    async def forgot_password(
        self, username: str | None = None, email: str | None = None
    ) -> None:
        """Mail a password reset link.

        Looks the user up by username, else by e-mail. Unknown users succeed
        silently.
        """
        with logfire.span("auth_service.forgot_password"):
            user = None
            if username:
                user = await self.user_service.get_user_by_username(username)
            elif email:
                user = await self.user_service.get_user_by_email(email)
            if not user:
                return

            code = await self.email_token_service.issue(user)
            await self.email_service.send_reset_password_email(user, code)

    async def reset_password(self, code: EmailTokenCode, new_password: Password) -> User:
        """Redeem a reset token and set a new password.

        Raises:
            NotFoundError: If the token doesn't exist or was already used
            TokenExpiredError: If the token has expired
        """
        with logfire.span("auth_service.reset_password"):
            user = await self.email_token_service.redeem(code)
            return await self.user_service.set_password(user, new_password)
