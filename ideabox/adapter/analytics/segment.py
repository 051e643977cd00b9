"""Segment analytics consumer.

Turns domain events into Segment ``identify`` and ``track`` calls over the
HTTP tracking API.
"""

from typing import Any

import httpx
import logfire

from ideabox.adapter.error import ProviderError
from ideabox.config import AnalyticsSettings
from ideabox.domain.event import (
    DomainAdded,
    DomainEvent,
    IdeaAdded,
    UserSignedUp,
    VoteCreated,
)


class SegmentAnalytics:
    """Event consumer reporting to Segment.

    Without a write key the calls are only logged.
    """

    def __init__(self, settings: AnalyticsSettings) -> None:
        self.settings = settings

    def calls(self, event: DomainEvent) -> list[tuple[str, dict[str, Any]]]:
        """Segment API calls for an event, as (endpoint, payload) pairs."""
        timestamp = event.occurred_at.isoformat()

        if isinstance(event, UserSignedUp):
            user = event.user
            user_id = str(user.id)
            traits = user.model_dump(
                mode="json",
                include={"username", "email", "has_verified_email", "created_at"},
            )
            return [
                ("identify", {"userId": user_id, "traits": traits, "timestamp": timestamp}),
                ("track", {"userId": user_id, "event": event.name, "timestamp": timestamp}),
            ]

        if isinstance(event, DomainAdded):
            user_id, properties = event.domain.user_id, event.domain.model_dump(mode="json")
        elif isinstance(event, IdeaAdded):
            user_id, properties = event.idea.user_id, event.idea.model_dump(mode="json")
        elif isinstance(event, VoteCreated):
            user_id, properties = event.vote.user_id, event.vote.model_dump(mode="json")
        else:
            return []

        return [
            (
                "track",
                {
                    "userId": str(user_id),
                    "event": event.name,
                    "properties": properties,
                    "timestamp": timestamp,
                },
            )
        ]

    async def handle(self, event: DomainEvent) -> None:
        """Send an event to Segment.

        Raises:
            ProviderError: If Segment is unreachable or rejects a call
        """
        calls = self.calls(event)
        if not calls:
            return

        if not self.settings.segment_write_key:
            logfire.info("Analytics disabled, event logged only", event_name=event.name)
            return

        base_url = self.settings.segment_url.rstrip("/")
        try:
            async with httpx.AsyncClient(
                timeout=10.0, auth=(self.settings.segment_write_key, "")
            ) as client:
                for endpoint, payload in calls:
                    response = await client.post(f"{base_url}/{endpoint}", json=payload)
                    if response.status_code >= 300:
                        raise ProviderError(
                            f"Segment {endpoint} failed: {response.status_code}"
                        )
        except httpx.HTTPError as e:
            raise ProviderError(f"Segment HTTP error: {e}") from e

        logfire.info("Analytics event sent", event_name=event.name)
