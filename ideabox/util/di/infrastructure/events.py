"""Event channel infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from ideabox.adapter.analytics import SegmentAnalytics
from ideabox.adapter.event import AsyncEventBus
from ideabox.config import AnalyticsSettings
from ideabox.domain.event import EventPublisher
from ideabox.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider: asyncio bus with the analytics consumer."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_event_publisher(
        self, analytics_settings: AnalyticsSettings
    ) -> AsyncIterator[EventPublisher]:
        """Provide event bus, drained and stopped when the app shuts down."""
        bus = AsyncEventBus(
            max_attempts=analytics_settings.max_attempts,
            retry_backoff_seconds=analytics_settings.retry_backoff_seconds,
        )
        bus.subscribe("analytics", SegmentAnalytics(analytics_settings).handle)
        yield bus
        await bus.close()
