"""E-mail token domain service."""

import secrets
from datetime import datetime, timedelta
from typing import Callable

import logfire

from ideabox.config import EmailSettings
from ideabox.domain.error import NotFoundError, TokenExpiredError
from ideabox.domain.model import EmailToken, User
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import EmailTokenRepository, UserRepository
from ideabox.domain.value import EmailTokenCode

from .base import Service


class EmailTokenService(Service):
    """Issues and redeems single-use, time-limited e-mail tokens.

    A token is Active until it is redeemed (consumed) or looked up after its
    validity window (expired). Both terminal states delete the row, so a
    second redemption of the same code is NotFound.
    """

    def __init__(
        self,
        email_token_repository: EmailTokenRepository,
        user_repository: UserRepository,
        email_settings: EmailSettings,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize e-mail token service.

        Args:
            email_token_repository: Token repository
            user_repository: User repository, for the owner of a redeemed token
            email_settings: Token validity window
            clock: Source of the current time
        """
        self.email_token_repository = email_token_repository
        self.user_repository = user_repository
        self.validity = timedelta(hours=email_settings.token_validity_hours)
        self.clock = clock

    async def issue(self, user: User) -> EmailTokenCode:
        """Create a token for a user and return its code.

        Sending the code is up to the caller.
        """
        with logfire.span("email_token_service.issue", user_id=str(user.id)):
            token = EmailToken(
                code=EmailTokenCode(secrets.token_urlsafe(32)),
                user_id=user.id,
                created_at=self.clock(),
            )
            await self.email_token_repository.create(token)
            logfire.info("E-mail token issued", user_id=str(user.id))
            return token.code

    async def redeem(self, code: EmailTokenCode) -> User:
        """Consume a token and mark its owner's e-mail as verified.

        Args:
            code: Token code from the e-mail link

        Returns:
            The token's owner

        Raises:
            NotFoundError: If the token doesn't exist or was already redeemed
            TokenExpiredError: If the validity window has passed; the token
                is deleted
        """
        with logfire.span("email_token_service.redeem"):
            token = await self.email_token_repository.find_by_code(code)
            if not token:
                logfire.warn("E-mail token not found")
                raise NotFoundError("EmailToken", "<redacted>")

            if not token.is_still_valid(self.clock(), self.validity):
                await self.email_token_repository.delete(code)
                logfire.info("E-mail token expired", user_id=str(token.user_id))
                raise TokenExpiredError()

            # Only one concurrent redeemer gets the row
            if not await self.email_token_repository.delete(code):
                logfire.warn("E-mail token already redeemed", user_id=str(token.user_id))
                raise NotFoundError("EmailToken", "<redacted>")

            user = await self.user_repository.find_by_id(token.user_id)
            if not user:
                raise NotFoundError("User", str(token.user_id))

            if not user.has_verified_email:
                user = await self.user_repository.save(
                    user.model_copy(
                        update={"has_verified_email": True, "updated_at": utcnow()}
                    )
                )

            logfire.info("E-mail token redeemed", user_id=str(user.id))
            return user
