"""List user domains use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import DomainInfo
from ideabox.domain.service import DomainService
from ideabox.domain.value import UserId


class ListUserDomainsRequest(BaseModel):
    """List user domains request."""

    user_id: str


class ListUserDomainsResponse(BaseModel):
    """List user domains response."""

    domains: list[DomainInfo]


class ListUserDomainsUseCase:
    """Use case for listing the domains a user registered."""

    def __init__(self, domain_service: DomainService) -> None:
        self.domain_service = domain_service

    async def execute(self, request: ListUserDomainsRequest) -> ListUserDomainsResponse:
        domains = await self.domain_service.list_domains_of_user(
            UserId(UUID(request.user_id))
        )
        return ListUserDomainsResponse(
            domains=[DomainInfo.from_domain(d) for d in domains]
        )
