"""Delete domain use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.domain.service import DomainService, UserService
from ideabox.domain.value import DomainId, UserId


class DeleteDomainRequest(BaseModel):
    """Delete domain request."""

    domain_id: str
    actor_id: str  # User ID from authenticated user


class DeleteDomainUseCase:
    """Use case for soft-deleting a domain (owner or admin)."""

    def __init__(self, domain_service: DomainService, user_service: UserService) -> None:
        self.domain_service = domain_service
        self.user_service = user_service

    async def execute(self, request: DeleteDomainRequest) -> None:
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        await self.domain_service.delete_domain(actor, DomainId(UUID(request.domain_id)))
