"""Domain events.

Services publish a typed event after a record is created. Consumers such as
analytics receive them through an EventPublisher implementation and never
affect the outcome of the operation that emitted them.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import ClassVar

from pydantic import Field

from ideabox.domain.model import Domain, Idea, User, Vote
from ideabox.domain.model.common import DomainModel, utcnow


class DomainEvent(DomainModel):
    """Base class for all events."""

    name: ClassVar[str] = "event"

    occurred_at: datetime = Field(default_factory=utcnow)


class UserSignedUp(DomainEvent):
    """A user account was created."""

    name: ClassVar[str] = "Signed Up"

    user: User


class DomainAdded(DomainEvent):
    """A domain was registered."""

    name: ClassVar[str] = "Added Domain"

    domain: Domain


class IdeaAdded(DomainEvent):
    """An idea was posted."""

    name: ClassVar[str] = "Added Idea"

    idea: Idea


class VoteCreated(DomainEvent):
    """A user voted on an idea for the first time."""

    name: ClassVar[str] = "Added Vote"

    vote: Vote


class EventPublisher(ABC):
    """Outbound channel for domain events."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Hand an event over for delivery without waiting for consumers.

        Args:
            event: The event to publish
        """
        pass
