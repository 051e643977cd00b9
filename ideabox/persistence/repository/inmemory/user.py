"""In-memory user repository for testing."""

from typing import Optional

from ideabox.domain.error import ConflictError
from ideabox.domain.model.common import utcnow
from ideabox.domain.model.user import User
from ideabox.domain.repository.user import UserRepository
from ideabox.domain.value import AuthProvider, RecordStatus, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Mirrors the partial unique indexes on normalized username, e-mail and
    provider ids.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(
        self, user_id: UserId, include_deleted: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        user = self._users.get(user_id)
        if user and (include_deleted or user.is_active):
            return user
        return None

    async def find_by_normalized_username(
        self, normalized_username: str
    ) -> Optional[User]:
        """Find an active user by lowercased username."""
        for user in self._users.values():
            if user.is_active and user.normalized_username == normalized_username:
                return user
        return None

    async def find_by_normalized_email(self, normalized_email: str) -> Optional[User]:
        """Find an active user by normalized e-mail."""
        for user in self._users.values():
            if user.is_active and user.normalized_email == normalized_email:
                return user
        return None

    async def find_by_provider_id(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[User]:
        """Find the active user linked to an OAuth provider account."""
        for user in self._users.values():
            if user.is_active and user.provider_ids.get(provider) == provider_user_id:
                return user
        return None

    async def find_all(self, include_deleted: bool = False) -> list[User]:
        """Find all users."""
        return [u for u in self._users.values() if include_deleted or u.is_active]

    async def find_deleted(self) -> list[User]:
        """Find soft-deleted users only."""
        return [u for u in self._users.values() if not u.is_active]

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            ConflictError: If another active user has the same username or e-mail
        """
        for other in self._users.values():
            if other.id == user.id or not other.is_active:
                continue
            if other.normalized_username == user.normalized_username:
                raise ConflictError("username", user.normalized_username)
            if other.normalized_email == user.normalized_email:
                raise ConflictError("email", user.normalized_email)
            for provider, provider_user_id in user.provider_ids.items():
                if other.provider_ids.get(provider) == provider_user_id:
                    raise ConflictError(provider.value, provider_user_id)
        self._users[user.id] = user
        return user

    async def soft_delete(self, user_id: UserId) -> int:
        """Mark a user DELETED."""
        user = await self.find_by_id(user_id)
        if not user:
            return 0
        now = utcnow()
        self._users[user_id] = user.model_copy(
            update={"status": RecordStatus.DELETED, "deleted_at": now, "updated_at": now}
        )
        return 1
