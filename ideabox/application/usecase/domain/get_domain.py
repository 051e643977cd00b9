"""Get domain use cases."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import DomainInfo
from ideabox.domain.service import DomainService
from ideabox.domain.value import DomainId


class GetDomainRequest(BaseModel):
    """Get domain by ID request."""

    domain_id: str


class GetDomainByNameRequest(BaseModel):
    """Get domain by host name request. ``www.`` hosts are accepted."""

    name: str


class GetDomainResponse(DomainInfo):
    """Get domain response."""


class GetDomainUseCase:
    """Use case for fetching a single domain."""

    def __init__(self, domain_service: DomainService) -> None:
        self.domain_service = domain_service

    async def execute(self, request: GetDomainRequest) -> GetDomainResponse:
        domain = await self.domain_service.get_domain(DomainId(UUID(request.domain_id)))
        return GetDomainResponse(**DomainInfo.from_domain(domain).model_dump())


class GetDomainByNameUseCase:
    """Use case for resolving a host name to its registered domain."""

    def __init__(self, domain_service: DomainService) -> None:
        self.domain_service = domain_service

    async def execute(self, request: GetDomainByNameRequest) -> GetDomainResponse:
        """Look up the domain.

        Raises:
            ValidationError: If the host is not a second level domain
            NotFoundError: If the domain isn't registered
        """
        domain = await self.domain_service.get_domain_by_name(request.name)
        return GetDomainResponse(**DomainInfo.from_domain(domain).model_dump())
