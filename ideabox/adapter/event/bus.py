"""Asyncio event bus.

Each subscriber owns a queue and a worker task, so a slow or failing
consumer never delays the publisher or the other consumers. Failed
deliveries are retried with exponential backoff, then dropped and logged.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable

import logfire

from ideabox.domain.event import DomainEvent, EventPublisher

EventHandler = Callable[[DomainEvent], Awaitable[None]]


@dataclass
class _Subscription:
    name: str
    handler: EventHandler
    queue: asyncio.Queue = field(default_factory=asyncio.Queue)
    worker: asyncio.Task | None = None


class AsyncEventBus(EventPublisher):
    """Fan-out publisher with per-subscriber queues."""

    def __init__(self, max_attempts: int = 3, retry_backoff_seconds: float = 0.5):
        """Initialize event bus.

        Args:
            max_attempts: Deliveries tried per event and subscriber
            retry_backoff_seconds: Delay before the first retry, doubled after
        """
        self.max_attempts = max(1, max_attempts)
        self.retry_backoff_seconds = retry_backoff_seconds
        self._subscriptions: list[_Subscription] = []

    def subscribe(self, name: str, handler: EventHandler) -> None:
        """Register a consumer for every published event."""
        self._subscriptions.append(_Subscription(name=name, handler=handler))

    def publish(self, event: DomainEvent) -> None:
        """Enqueue an event for every subscriber and return immediately."""
        for subscription in self._subscriptions:
            self._ensure_worker(subscription)
            subscription.queue.put_nowait(event)
        logfire.debug(
            "Event published",
            event_name=event.name,
            subscribers=len(self._subscriptions),
        )

    def _ensure_worker(self, subscription: _Subscription) -> None:
        # Workers start on first publish, inside the running loop
        if subscription.worker is None or subscription.worker.done():
            subscription.worker = asyncio.get_running_loop().create_task(
                self._run(subscription), name=f"event-bus:{subscription.name}"
            )

    async def _run(self, subscription: _Subscription) -> None:
        while True:
            event = await subscription.queue.get()
            try:
                await self._deliver(subscription, event)
            finally:
                subscription.queue.task_done()

    async def _deliver(self, subscription: _Subscription, event: DomainEvent) -> None:
        for attempt in range(1, self.max_attempts + 1):
            try:
                await subscription.handler(event)
                return
            except Exception as e:
                logfire.warn(
                    "Event handler failed",
                    subscriber=subscription.name,
                    event_name=event.name,
                    attempt=attempt,
                    error=str(e),
                )
                if attempt < self.max_attempts:
                    await asyncio.sleep(self.retry_backoff_seconds * 2 ** (attempt - 1))

        logfire.error(
            "Event dropped after retries",
            subscriber=subscription.name,
            event_name=event.name,
            attempts=self.max_attempts,
        )

    async def drain(self) -> None:
        """Wait until every queued event has been handled or dropped."""
        for subscription in self._subscriptions:
            if subscription.worker is not None:
                await subscription.queue.join()

    async def close(self) -> None:
        """Drain the queues, then stop the workers."""
        await self.drain()
        for subscription in self._subscriptions:
            if subscription.worker is not None:
                subscription.worker.cancel()
                try:
                    await subscription.worker
                except asyncio.CancelledError:
                    pass
                subscription.worker = None


class RecordingEventPublisher(EventPublisher):
    """Event publisher for testing, keeping every event in order."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        """Record an event."""
        self.events.append(event)

    def of_type(self, event_type: type[DomainEvent]) -> list[DomainEvent]:
        """Recorded events of one class."""
        return [e for e in self.events if isinstance(e, event_type)]
