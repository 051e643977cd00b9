"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from ideabox.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from ideabox.domain.repository import UserRepository
from ideabox.domain.service import UserService
from ideabox.domain.value import (
    AuthProvider,
    EmailAddress,
    OAuthProfile,
    OAuthTokens,
    Password,
    UserId,
    Username,
)
from ideabox.util.password import verify_password
from tests.conftest import PASSWORD, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for account creation."""

    @pytest.mark.asyncio
    async def test_create_with_password(self, unit_env):
        """Usernames and addresses are stored as typed plus normalized."""
        user_service = await unit_env.get(UserService)

        user = await make_user(user_service, "Alice", "Alice@Example.com")

        assert user.username == "Alice"
        assert user.normalized_username == "alice"
        assert user.normalized_email == "alice@example.com"
        assert user.has_verified_email is False
        assert user.password_hash != PASSWORD
        assert verify_password(PASSWORD, user.password_hash)

    @pytest.mark.asyncio
    async def test_username_taken_case_insensitively(self, unit_env):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice", "one@example.com")

        with pytest.raises(ConflictError) as exc_info:
            await make_user(user_service, "ALICE", "two@example.com")

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_email_taken(self, unit_env):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice", "same@example.com")

        with pytest.raises(ConflictError) as exc_info:
            await make_user(user_service, "bobby", "SAME@example.com")

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_deleted_user_frees_username(self, unit_env):
        user_service = await unit_env.get(UserService)
        old = await make_user(user_service, "alice")
        await user_service.delete_user(old.id)

        new = await make_user(user_service, "alice")

        assert new.id != old.id


class TestAuthenticate:
    """Tests for credential checks."""

    @pytest.mark.asyncio
    async def test_valid_credentials(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service, "alice")

        assert (await user_service.authenticate("ALICE", PASSWORD)).id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [("alice", "wrong"), ("nobody", PASSWORD)])
    async def test_invalid_credentials(self, unit_env, username, password):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice")

        with pytest.raises(NotAuthorizedError, match="Invalid credentials"):
            await user_service.authenticate(username, password)


class TestUpdateUser:
    """Tests for UserService.update_user."""

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service)

        updated = await user_service.update_user(
            user.id, old_password=PASSWORD, new_password=Password("N3w!password")
        )

        assert verify_password("N3w!password", updated.password_hash)
        assert not verify_password(PASSWORD, updated.password_hash)

    @pytest.mark.asyncio
    async def test_wrong_old_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service)

        with pytest.raises(NotAuthorizedError):
            await user_service.update_user(
                user.id, old_password="Wr0ng!pass", new_password=Password("N3w!password")
            )

    @pytest.mark.asyncio
    async def test_passwords_go_together(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service)

        with pytest.raises(ValidationError):
            await user_service.update_user(user.id, new_password=Password("N3w!password"))

    @pytest.mark.asyncio
    async def test_new_email_needs_verification(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repository = await unit_env.get(UserRepository)
        user = await make_user(user_service)
        await user_repository.save(user.model_copy(update={"has_verified_email": True}))

        updated = await user_service.update_user(
            user.id, email=EmailAddress("new@example.com")
        )

        assert updated.email == "new@example.com"
        assert updated.has_verified_email is False

    @pytest.mark.asyncio
    async def test_rename_to_taken_username(self, unit_env):
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "alice")
        bob = await make_user(user_service, "bobby")

        with pytest.raises(ConflictError):
            await user_service.update_user(bob.id, username=Username("Alice"))

    @pytest.mark.asyncio
    async def test_nothing_to_update(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service)

        assert await user_service.update_user(user.id) == user


class TestDeleteUser:
    """Tests for account deletion."""

    @pytest.mark.asyncio
    async def test_deleted_user_is_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service)

        await user_service.delete_user(user.id)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(user.id)
        assert [u.id for u in await user_service.list_deleted()] == [user.id]

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))


def _profile(
    provider_user_id: str = "gh-42",
    email: str | None = "alice@example.com",
    provider: AuthProvider = AuthProvider.GITHUB,
) -> OAuthProfile:
    return OAuthProfile(
        provider=provider,
        provider_user_id=provider_user_id,
        email=email,
        tokens=OAuthTokens(access_token="access", refresh_token="refresh", code="code"),
    )


class TestFindOrCreateByOAuth:
    """Tests for resolving an OAuth sign-in to an account."""

    @pytest.mark.asyncio
    async def test_new_account_is_created(self, unit_env):
        """Unknown provider id and e-mail create a passwordless user."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user, created = await user_service.find_or_create_by_oauth(_profile())

        # Assert
        assert created is True
        assert user.normalized_email == "alice@example.com"
        assert user.password_hash is None
        assert user.has_verified_email is False
        assert user.provider_ids == {AuthProvider.GITHUB: "gh-42"}
        assert user.oauth_tokens[AuthProvider.GITHUB].refresh_token == "refresh"
        assert 4 <= len(user.username) <= 20

    @pytest.mark.asyncio
    async def test_known_provider_id_signs_in(self, unit_env):
        """A linked provider id wins, whatever e-mail the provider reports."""
        user_service = await unit_env.get(UserService)
        first, _ = await user_service.find_or_create_by_oauth(_profile())

        fresh = _profile(email="changed@example.com").model_copy(
            update={"tokens": OAuthTokens(access_token="access-2", code="code-2")}
        )

        again, created = await user_service.find_or_create_by_oauth(fresh)

        assert created is False
        assert again.id == first.id
        assert again.normalized_email == "alice@example.com"
        assert again.oauth_tokens[AuthProvider.GITHUB].access_token == "access-2"
        assert len(await user_service.list_all()) == 1

    @pytest.mark.asyncio
    async def test_email_match_links_provider(self, unit_env):
        """A password account with the same e-mail gets the provider linked."""
        user_service = await unit_env.get(UserService)
        user_repository = await unit_env.get(UserRepository)
        existing = await make_user(user_service, "alice", "Alice@Example.com")

        linked, created = await user_service.find_or_create_by_oauth(_profile())

        assert created is False
        assert linked.id == existing.id
        assert linked.provider_ids == {AuthProvider.GITHUB: "gh-42"}
        assert verify_password(PASSWORD, linked.password_hash)
        stored = await user_repository.find_by_provider_id(AuthProvider.GITHUB, "gh-42")
        assert stored is not None and stored.id == existing.id

    @pytest.mark.asyncio
    async def test_second_provider_keeps_first(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.find_or_create_by_oauth(_profile())

        user, created = await user_service.find_or_create_by_oauth(
            _profile(provider_user_id="g-7", provider=AuthProvider.GOOGLE)
        )

        assert created is False
        assert user.provider_ids == {
            AuthProvider.GITHUB: "gh-42",
            AuthProvider.GOOGLE: "g-7",
        }

    @pytest.mark.asyncio
    async def test_new_account_needs_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.find_or_create_by_oauth(_profile(email=None))

        assert await user_service.list_all() == []

    @pytest.mark.asyncio
    async def test_deleted_account_is_not_signed_in(self, unit_env):
        """A soft-deleted user's provider id no longer matches."""
        user_service = await unit_env.get(UserService)
        old, _ = await user_service.find_or_create_by_oauth(_profile())
        await user_service.delete_user(old.id)

        user, created = await user_service.find_or_create_by_oauth(_profile())

        assert created is True
        assert user.id != old.id
