"""In-process event channel."""

from .bus import AsyncEventBus, RecordingEventPublisher

__all__ = ["AsyncEventBus", "RecordingEventPublisher"]
