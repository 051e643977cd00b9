"""Unit tests for the Segment analytics consumer."""

from uuid import uuid4

import pytest

from ideabox.adapter.analytics import SegmentAnalytics
from ideabox.config import AnalyticsSettings
from ideabox.domain.event import DomainAdded, IdeaAdded, UserSignedUp
from ideabox.domain.model import Domain, Idea, User
from ideabox.domain.value import DomainId, DomainName, IdeaId, UserId


def _user() -> User:
    return User(
        id=UserId(uuid4()),
        username="Alice",
        normalized_username="alice",
        email="alice@example.com",
        normalized_email="alice@example.com",
        password_hash="secret-hash",
    )


class TestSegmentCalls:
    """Mapping of events to Segment calls."""

    def test_sign_up_identifies_and_tracks(self):
        analytics = SegmentAnalytics(AnalyticsSettings())
        user = _user()

        calls = analytics.calls(UserSignedUp(user=user))

        assert [endpoint for endpoint, _ in calls] == ["identify", "track"]
        identify, track = calls[0][1], calls[1][1]
        assert identify["userId"] == str(user.id)
        assert identify["traits"]["username"] == "Alice"
        assert "password_hash" not in identify["traits"]
        assert track["event"] == "Signed Up"

    def test_domain_added_is_tracked_for_owner(self):
        analytics = SegmentAnalytics(AnalyticsSettings())
        domain = Domain(
            id=DomainId(uuid4()), name=DomainName("example.com"), user_id=UserId(uuid4())
        )

        [(endpoint, payload)] = analytics.calls(DomainAdded(domain=domain))

        assert endpoint == "track"
        assert payload["event"] == "Added Domain"
        assert payload["userId"] == str(domain.user_id)
        assert payload["properties"]["name"] == "example.com"

    def test_idea_added(self):
        analytics = SegmentAnalytics(AnalyticsSettings())
        idea = Idea(
            id=IdeaId(uuid4()),
            headline="Dark mode",
            user_id=UserId(uuid4()),
            domain_id=DomainId(uuid4()),
        )

        [(_, payload)] = analytics.calls(IdeaAdded(idea=idea))

        assert payload["event"] == "Added Idea"
        assert payload["properties"]["headline"] == "Dark mode"

    @pytest.mark.asyncio
    async def test_handle_without_write_key_sends_nothing(self):
        analytics = SegmentAnalytics(AnalyticsSettings(segment_write_key=None))

        await analytics.handle(UserSignedUp(user=_user()))
