"""Unit tests for EmailTokenService."""

from datetime import datetime, timedelta, timezone

import pytest

from ideabox.config import EmailSettings
from ideabox.domain.error import NotFoundError, TokenExpiredError
from ideabox.domain.repository import EmailTokenRepository, UserRepository
from ideabox.domain.service import EmailTokenService, UserService
from ideabox.domain.value import EmailTokenCode
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ISSUED_AT = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
VALIDITY = timedelta(hours=24)


class FrozenClock:
    """Clock a test moves by hand."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


async def _service(unit_env, clock: FrozenClock) -> EmailTokenService:
    return EmailTokenService(
        email_token_repository=await unit_env.get(EmailTokenRepository),
        user_repository=await unit_env.get(UserRepository),
        email_settings=EmailSettings(token_validity_hours=24),
        clock=clock,
    )


class TestRedeem:
    """Tests for the token lifecycle."""

    @pytest.mark.asyncio
    async def test_redeem_verifies_email(self, unit_env):
        """Redeeming returns the owner with a verified address."""
        # Arrange
        clock = FrozenClock(ISSUED_AT)
        service = await _service(unit_env, clock)
        user = await make_user(await unit_env.get(UserService))
        code = await service.issue(user)

        # Act
        redeemed = await service.redeem(code)

        # Assert
        assert redeemed.id == user.id
        assert redeemed.has_verified_email is True

    @pytest.mark.asyncio
    async def test_second_redeem_is_not_found(self, unit_env):
        """Tokens are single use."""
        clock = FrozenClock(ISSUED_AT)
        service = await _service(unit_env, clock)
        user = await make_user(await unit_env.get(UserService))
        code = await service.issue(user)
        await service.redeem(code)

        with pytest.raises(NotFoundError):
            await service.redeem(code)

    @pytest.mark.asyncio
    async def test_unknown_code_is_not_found(self, unit_env):
        service = await _service(unit_env, FrozenClock(ISSUED_AT))

        with pytest.raises(NotFoundError):
            await service.redeem(EmailTokenCode("no-such-code"))

    @pytest.mark.asyncio
    async def test_redeem_just_before_deadline(self, unit_env):
        """The token is still valid one second before its window closes."""
        clock = FrozenClock(ISSUED_AT)
        service = await _service(unit_env, clock)
        user = await make_user(await unit_env.get(UserService))
        code = await service.issue(user)

        clock.now = ISSUED_AT + VALIDITY - timedelta(seconds=1)
        redeemed = await service.redeem(code)

        assert redeemed.id == user.id

    @pytest.mark.asyncio
    async def test_token_expires_at_exact_deadline(self, unit_env):
        """At exactly issue time plus the window the token is already gone."""
        clock = FrozenClock(ISSUED_AT)
        service = await _service(unit_env, clock)
        user = await make_user(await unit_env.get(UserService))
        code = await service.issue(user)

        clock.now = ISSUED_AT + VALIDITY
        with pytest.raises(TokenExpiredError):
            await service.redeem(code)

    @pytest.mark.asyncio
    async def test_expired_token_is_gone_then_not_found(self, unit_env):
        """An expired token raises TokenExpiredError once and is deleted."""
        clock = FrozenClock(ISSUED_AT)
        service = await _service(unit_env, clock)
        token_repository = await unit_env.get(EmailTokenRepository)
        user = await make_user(await unit_env.get(UserService))
        code = await service.issue(user)

        clock.now = ISSUED_AT + VALIDITY + timedelta(seconds=1)
        with pytest.raises(TokenExpiredError):
            await service.redeem(code)

        assert await token_repository.find_by_code(code) is None
        with pytest.raises(NotFoundError):
            await service.redeem(code)

    @pytest.mark.asyncio
    async def test_expired_token_leaves_user_unverified(self, unit_env):
        clock = FrozenClock(ISSUED_AT)
        service = await _service(unit_env, clock)
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service)
        code = await service.issue(user)

        clock.now = ISSUED_AT + timedelta(days=2)
        with pytest.raises(TokenExpiredError):
            await service.redeem(code)

        assert (await user_service.get_by_id(user.id)).has_verified_email is False

    @pytest.mark.asyncio
    async def test_issue_creates_distinct_codes(self, unit_env):
        service = await _service(unit_env, FrozenClock(ISSUED_AT))
        user = await make_user(await unit_env.get(UserService))

        first = await service.issue(user)
        second = await service.issue(user)

        assert first != second
        assert len(first.root) >= 32
