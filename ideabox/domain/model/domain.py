"""Domain entity.

A website registered by a user. Ideas are posted against a domain, and an
added domain gets routed by Traefik once its DNS points at us.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ideabox.domain.model.common import SoftDeletableModel, utcnow
from ideabox.domain.value import DomainId, DomainName, UserId


class Domain(SoftDeletableModel):
    """Registered second level domain."""

    id: DomainId
    name: DomainName
    user_id: UserId
    has_verified_dns: bool = False
    last_verified_dns: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
