"""Unit tests for the asyncio event bus."""

import asyncio
from uuid import uuid4

import pytest

from ideabox.adapter.event import AsyncEventBus
from ideabox.domain.event import VoteCreated
from ideabox.domain.model import Vote
from ideabox.domain.value import IdeaId, UserId, VoteId, VoteType


def _event() -> VoteCreated:
    return VoteCreated(
        vote=Vote(
            id=VoteId(uuid4()),
            user_id=UserId(uuid4()),
            idea_id=IdeaId(uuid4()),
            type=VoteType.UP,
        )
    )


class TestAsyncEventBus:
    """Delivery, retry and isolation of subscribers."""

    @pytest.mark.asyncio
    async def test_every_subscriber_receives_event(self):
        bus = AsyncEventBus(retry_backoff_seconds=0)
        first, second = [], []

        async def record_first(event):
            first.append(event)

        async def record_second(event):
            second.append(event)

        bus.subscribe("first", record_first)
        bus.subscribe("second", record_second)
        event = _event()

        bus.publish(event)
        await bus.close()

        assert first == [event]
        assert second == [event]

    @pytest.mark.asyncio
    async def test_failed_delivery_is_retried(self):
        bus = AsyncEventBus(max_attempts=3, retry_backoff_seconds=0)
        attempts = []

        async def flaky(event):
            attempts.append(event)
            if len(attempts) < 3:
                raise RuntimeError("unavailable")

        bus.subscribe("flaky", flaky)

        bus.publish(_event())
        await bus.close()

        assert len(attempts) == 3

    @pytest.mark.asyncio
    async def test_event_dropped_after_max_attempts(self):
        """A failing consumer gives up and keeps serving later events."""
        bus = AsyncEventBus(max_attempts=2, retry_backoff_seconds=0)
        attempts = []

        async def broken(event):
            attempts.append(event)
            raise RuntimeError("down")

        bus.subscribe("broken", broken)

        bus.publish(_event())
        bus.publish(_event())
        await bus.close()

        assert len(attempts) == 4

    @pytest.mark.asyncio
    async def test_slow_consumer_does_not_block_publisher(self):
        bus = AsyncEventBus(retry_backoff_seconds=0)
        release = asyncio.Event()
        fast = []

        async def slow(event):
            await release.wait()

        async def quick(event):
            fast.append(event)

        bus.subscribe("slow", slow)
        bus.subscribe("quick", quick)

        bus.publish(_event())
        await asyncio.sleep(0.01)

        assert len(fast) == 1
        release.set()
        await bus.close()

    @pytest.mark.asyncio
    async def test_publish_without_subscribers(self):
        bus = AsyncEventBus()

        bus.publish(_event())
        await bus.close()
