"""User domain service."""

from uuid import uuid4

import logfire

from ideabox.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from ideabox.domain.model import User
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import UserRepository
from ideabox.domain.value import (
    EmailAddress,
    OAuthProfile,
    Password,
    UserId,
    Username,
)
from ideabox.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_username(self, username: str) -> User | None:
        """Get user by username, case-insensitively.

        Args:
            username: Username as typed

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username):
            user = await self.user_repository.find_by_normalized_username(
                username.lower()
            )
            if not user:
                logfire.warn("User not found", username=username)
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by e-mail, after normalization.

        Args:
            email: E-mail as typed

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_normalized_email(
                email.strip().lower()
            )
            if not user:
                logfire.warn("User not found by e-mail")
            return user

    async def create_with_password(
        self, username: Username, email: EmailAddress, password: Password
    ) -> User:
        """Create a user account.

        Raises:
            ConflictError: If username or e-mail is already taken
        """
        with logfire.span("user_service.create_with_password", username=username.root):
            user = User(
                id=UserId(uuid4()),
                username=username.root,
                normalized_username=username.normalized(),
                email=email.root,
                normalized_email=email.normalized(),
                password_hash=hash_password(password.root),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), username=saved.username)
            return saved

    async def find_or_create_by_oauth(self, profile: OAuthProfile) -> tuple[User, bool]:
        """Resolve the account behind an OAuth sign-in.

        Lookup order: the provider id, then the e-mail address (which links
        the provider to that account), then a new account with a generated
        username and no password. The provider tokens are stored each time.

        Args:
            profile: Provider account details from the code exchange

        Returns:
            The user, and whether it was created

        Raises:
            ValidationError: If a new account is needed but the provider
                gave no e-mail address
            ConflictError: If the generated username collides
        """
        with logfire.span(
            "user_service.find_or_create_by_oauth",
            provider=profile.provider.value,
            provider_user_id=profile.provider_user_id,
        ):
            user = await self.user_repository.find_by_provider_id(
                profile.provider, profile.provider_user_id
            )
            if user:
                refreshed = await self.user_repository.save(user.link_provider(profile))
                logfire.info("OAuth account known", user_id=str(user.id))
                return refreshed, False

            if not profile.email:
                logfire.warn("OAuth account has no e-mail address")
                raise ValidationError(
                    f"Your {profile.provider.value} account has no e-mail address"
                )
            email = EmailAddress(profile.email)

            user = await self.user_repository.find_by_normalized_email(
                email.normalized()
            )
            if user:
                linked = await self.user_repository.save(user.link_provider(profile))
                logfire.info(
                    "OAuth account linked by e-mail",
                    user_id=str(user.id),
                    provider=profile.provider.value,
                )
                return linked, False

            # 20 hex characters, the longest username the schema allows
            username = Username(uuid4().hex[:20])
            user = User(
                id=UserId(uuid4()),
                username=username.root,
                normalized_username=username.normalized(),
                email=email.root,
                normalized_email=email.normalized(),
            ).link_provider(profile)
            saved = await self.user_repository.save(user)
            logfire.info(
                "User created from OAuth account",
                user_id=str(saved.id),
                provider=profile.provider.value,
            )
            return saved, True

    async def authenticate(self, username: str, password: str) -> User:
        """Check a username and password pair.

        Raises:
            NotAuthorizedError: If the user doesn't exist or the password is wrong
        """
        with logfire.span("user_service.authenticate", username=username):
            user = await self.user_repository.find_by_normalized_username(
                username.lower()
            )
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Invalid credentials", username=username)
                raise NotAuthorizedError(message="Invalid credentials")
            return user

    async def set_password(self, user: User, password: Password) -> User:
        """Replace a user's password hash."""
        with logfire.span("user_service.set_password", user_id=str(user.id)):
            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "password_hash": hash_password(password.root),
                        "updated_at": utcnow(),
                    }
                )
            )
            logfire.info("Password changed", user_id=str(user.id))
            return saved

    async def update_user(
        self,
        user_id: UserId,
        username: Username | None = None,
        email: EmailAddress | None = None,
        old_password: str | None = None,
        new_password: Password | None = None,
    ) -> User:
        """Update a user's own account.

        A password change needs both the current and the new password.
        Changing the e-mail address resets its verification.

        Raises:
            NotFoundError: If user not found
            ValidationError: If only one of the passwords is given
            NotAuthorizedError: If the current password is wrong
            ConflictError: If the new username or e-mail is taken
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            if (old_password is None) != (new_password is None):
                raise ValidationError(
                    "old_password and new_password must be provided together"
                )

            updates: dict = {}
            if old_password is not None and new_password is not None:
                if not verify_password(old_password, user.password_hash):
                    logfire.warn("Incorrect existing password", user_id=str(user_id))
                    raise NotAuthorizedError(message="Incorrect existing password")
                updates["password_hash"] = hash_password(new_password.root)
            if username is not None:
                updates["username"] = username.root
                updates["normalized_username"] = username.normalized()
            if email is not None and email.normalized() != user.normalized_email:
                updates["email"] = email.root
                updates["normalized_email"] = email.normalized()
                updates["has_verified_email"] = False

            if not updates:
                return user

            updates["updated_at"] = utcnow()
            saved = await self.user_repository.save(user.model_copy(update=updates))
            logfire.info(
                "User updated",
                user_id=str(user_id),
                fields=sorted(k for k in updates if k != "password_hash"),
            )
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Soft-delete a user account."""
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            affected = await self.user_repository.soft_delete(user_id)
            self.ensure_affected(affected, "user", str(user_id))
            logfire.info("User deleted", user_id=str(user_id))

    async def list_all(self, include_deleted: bool = False) -> list[User]:
        """All users, optionally including soft-deleted ones."""
        return await self.user_repository.find_all(include_deleted=include_deleted)

    async def list_deleted(self) -> list[User]:
        """Soft-deleted users only."""
        return await self.user_repository.find_deleted()
