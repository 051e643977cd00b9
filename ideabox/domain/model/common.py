"""Base models for all domain entities."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ideabox.domain.value import RecordStatus


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class SoftDeletableModel(DomainModel):
    """Entity that is marked DELETED instead of being removed."""

    status: RecordStatus = RecordStatus.ACTIVE
    deleted_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        """Whether the record has not been soft-deleted."""
        return self.status == RecordStatus.ACTIVE
