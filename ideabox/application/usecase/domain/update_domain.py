"""Update domain use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import DomainInfo
from ideabox.domain.service import DomainService, UserService
from ideabox.domain.value import DomainId, UserId


class UpdateDomainRequest(BaseModel):
    """Update domain request. Omitted fields stay unchanged."""

    domain_id: str
    actor_id: str  # User ID from authenticated user
    name: str | None = None
    has_verified_dns: bool | None = None
    last_verified_dns: datetime | None = None


class UpdateDomainResponse(DomainInfo):
    """Update domain response."""


class UpdateDomainUseCase:
    """Use case for editing a domain (owner or admin)."""

    def __init__(self, domain_service: DomainService, user_service: UserService) -> None:
        self.domain_service = domain_service
        self.user_service = user_service

    async def execute(self, request: UpdateDomainRequest) -> UpdateDomainResponse:
        """Apply the update.

        Raises:
            NotFoundError: If the domain doesn't exist
            NotAuthorizedError: If the actor is neither owner nor admin
            ConflictError: If the new name is taken
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        domain = await self.domain_service.update_domain(
            actor,
            DomainId(UUID(request.domain_id)),
            name=request.name,
            has_verified_dns=request.has_verified_dns,
            last_verified_dns=request.last_verified_dns,
        )
        return UpdateDomainResponse(**DomainInfo.from_domain(domain).model_dump())
