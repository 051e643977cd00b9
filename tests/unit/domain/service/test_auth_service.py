"""Unit tests for AuthService."""

import pytest

from ideabox.adapter.event import RecordingEventPublisher
from ideabox.adapter.oauth import StaticOAuthClient
from ideabox.adapter.sendgrid import RecordingEmailSender
from ideabox.domain.error import (
    InternalFailureError,
    NotAuthorizedError,
    NotFoundError,
)
from ideabox.domain.event import UserSignedUp
from ideabox.domain.service import AuthService, UserService
from ideabox.domain.value import (
    AuthProvider,
    EmailAddress,
    EmailTokenCode,
    Password,
    Username,
)
from ideabox.util.password import verify_password
from tests.conftest import PASSWORD, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _code_from(sender: RecordingEmailSender) -> EmailTokenCode:
    """Token code at the end of the last mailed link."""
    return EmailTokenCode(sender.sent[-1].text.rsplit("/", 1)[-1])


async def _sign_up(auth_service: AuthService, username: str = "alice"):
    return await auth_service.sign_up(
        Username(username), EmailAddress(f"{username}@example.com"), Password(PASSWORD)
    )


class TestSignUp:
    """Tests for AuthService.sign_up."""

    @pytest.mark.asyncio
    async def test_sign_up_sends_verification(self, unit_env):
        """A new account gets a verification link and a Signed Up event."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        sender = await unit_env.get(RecordingEmailSender)
        publisher = await unit_env.get(RecordingEventPublisher)

        # Act
        user = await _sign_up(auth_service)

        # Assert
        assert len(sender.sent) == 1
        message = sender.sent[0]
        assert message.to == "alice@example.com"
        assert message.subject == "Welcome! Please verify your email address"
        assert message.text.startswith("http://localhost:3000/verify-email/")
        assert [e.user.id for e in publisher.of_type(UserSignedUp)] == [user.id]

    @pytest.mark.asyncio
    async def test_verification_link_verifies(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        sender = await unit_env.get(RecordingEmailSender)
        user = await _sign_up(auth_service)

        verified = await auth_service.verify_email(_code_from(sender))

        assert verified.id == user.id
        assert verified.has_verified_email is True

    @pytest.mark.asyncio
    async def test_mail_outage_fails_sign_up(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        sender = await unit_env.get(RecordingEmailSender)
        publisher = await unit_env.get(RecordingEventPublisher)
        sender.fail = True

        with pytest.raises(InternalFailureError):
            await _sign_up(auth_service)

        assert publisher.of_type(UserSignedUp) == []


class TestEmailFlows:
    """Tests for resending verification and resetting passwords."""

    @pytest.mark.asyncio
    async def test_resend_issues_new_link(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        sender = await unit_env.get(RecordingEmailSender)
        await _sign_up(auth_service)
        first = _code_from(sender)

        await auth_service.resend_verification("ALICE@example.com")

        assert len(sender.sent) == 2
        assert _code_from(sender) != first

    @pytest.mark.asyncio
    async def test_unknown_addresses_are_silent(self, unit_env):
        """Nothing is sent and nothing is raised for unknown users."""
        auth_service = await unit_env.get(AuthService)
        sender = await unit_env.get(RecordingEmailSender)

        await auth_service.resend_verification("nobody@example.com")
        await auth_service.forgot_password(username="nobody")
        await auth_service.forgot_password(email="nobody@example.com")
        await auth_service.forgot_password()

        assert sender.sent == []

    @pytest.mark.asyncio
    async def test_reset_password(self, unit_env):
        """The reset link sets a new password once."""
        auth_service = await unit_env.get(AuthService)
        user_service = await unit_env.get(UserService)
        sender = await unit_env.get(RecordingEmailSender)
        user = await make_user(user_service)

        await auth_service.forgot_password(username="Alice")
        message = sender.sent[-1]
        assert message.subject == "Reset your password on localhost"
        assert "/auth/reset-password/" in message.text

        code = _code_from(sender)
        updated = await auth_service.reset_password(code, Password("N3w!password"))

        assert updated.id == user.id
        assert verify_password("N3w!password", updated.password_hash)
        with pytest.raises(NotFoundError):
            await auth_service.reset_password(code, Password("Other!pass1"))

    @pytest.mark.asyncio
    async def test_sign_in(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await _sign_up(auth_service)

        assert (await auth_service.sign_in("alice", PASSWORD)).id == user.id


class TestOAuthSignIn:
    """Tests for AuthService.sign_in_with_oauth."""

    @pytest.mark.asyncio
    async def test_new_account_is_welcomed(self, unit_env):
        """A first OAuth sign-in sends a verification link and a Signed Up event."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        oauth_client = await unit_env.get(StaticOAuthClient)
        sender = await unit_env.get(RecordingEmailSender)
        publisher = await unit_env.get(RecordingEventPublisher)
        oauth_client.add("code-1", AuthProvider.GITHUB, "gh-42", "alice@example.com")

        # Act
        user = await auth_service.sign_in_with_oauth(AuthProvider.GITHUB, "code-1")

        # Assert
        assert user.provider_ids == {AuthProvider.GITHUB: "gh-42"}
        assert [m.to for m in sender.sent] == ["alice@example.com"]
        assert sender.sent[0].text.startswith("http://localhost:3000/verify-email/")
        assert [e.user.id for e in publisher.of_type(UserSignedUp)] == [user.id]

    @pytest.mark.asyncio
    async def test_returning_account_is_quiet(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        oauth_client = await unit_env.get(StaticOAuthClient)
        sender = await unit_env.get(RecordingEmailSender)
        publisher = await unit_env.get(RecordingEventPublisher)
        oauth_client.add("code-1", AuthProvider.GITHUB, "gh-42", "alice@example.com")
        oauth_client.add("code-2", AuthProvider.GITHUB, "gh-42", "alice@example.com")
        first = await auth_service.sign_in_with_oauth(AuthProvider.GITHUB, "code-1")

        again = await auth_service.sign_in_with_oauth(AuthProvider.GITHUB, "code-2")

        assert again.id == first.id
        assert len(sender.sent) == 1
        assert len(publisher.of_type(UserSignedUp)) == 1

    @pytest.mark.asyncio
    async def test_linking_existing_account_sends_nothing(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        oauth_client = await unit_env.get(StaticOAuthClient)
        sender = await unit_env.get(RecordingEmailSender)
        user = await _sign_up(auth_service)
        sent_before = len(sender.sent)
        oauth_client.add("code-1", AuthProvider.GOOGLE, "g-7", "alice@example.com")

        linked = await auth_service.sign_in_with_oauth(AuthProvider.GOOGLE, "code-1")

        assert linked.id == user.id
        assert len(sender.sent) == sent_before

    @pytest.mark.asyncio
    async def test_rejected_code(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(NotAuthorizedError):
            await auth_service.sign_in_with_oauth(AuthProvider.GITHUB, "bogus")

    @pytest.mark.asyncio
    async def test_start_carries_state(self, unit_env):
        """The authorization URL echoes the state value."""
        auth_service = await unit_env.get(AuthService)

        url = auth_service.start_oauth(AuthProvider.FACEBOOK, "xyz")

        assert url == "https://facebook.test/authorize?state=xyz"
