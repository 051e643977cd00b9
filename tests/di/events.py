"""Mock event providers for testing."""

from dishka import Scope, provide

from ideabox.adapter.event import RecordingEventPublisher
from ideabox.domain.event import EventPublisher
from ideabox.util.di.infrastructure.events import EventsProvider


class MockEventsProvider(EventsProvider):
    """Mock events provider recording published events in order."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_publisher(self) -> RecordingEventPublisher:
        """Provide recording publisher (for assertions)."""
        return RecordingEventPublisher()

    @provide(scope=Scope.APP)
    def get_event_publisher(self, publisher: RecordingEventPublisher) -> EventPublisher:
        """Provide the recording publisher as the domain's EventPublisher."""
        return publisher
