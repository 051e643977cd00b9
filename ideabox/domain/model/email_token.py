"""E-mail token entity.

A single-use, time-limited code bound to a user. It is sent in e-mail links
for address verification and password reset. Consuming or expiring a token
deletes it, so there is no "used" marker.
"""

from datetime import datetime, timedelta

from pydantic import Field

from ideabox.domain.model.common import DomainModel, utcnow
from ideabox.domain.value import EmailTokenCode, UserId


class EmailToken(DomainModel):
    """E-mail token."""

    code: EmailTokenCode
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)

    def expires_at(self, validity: timedelta) -> datetime:
        """Deadline after which the token can no longer be redeemed."""
        return self.created_at + validity

    def is_still_valid(self, now: datetime, validity: timedelta) -> bool:
        """Whether the token can be redeemed at ``now``."""
        return now - self.created_at < validity
