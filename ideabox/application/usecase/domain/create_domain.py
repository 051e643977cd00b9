"""Create domain use case."""

from uuid import UUID

from pydantic import BaseModel

from ideabox.application.usecase.common import DomainInfo
from ideabox.domain.service import DomainService, UserService
from ideabox.domain.value import UserId


class CreateDomainRequest(BaseModel):
    """Create domain request."""

    name: str
    user_id: str  # User ID from authenticated user


class CreateDomainResponse(DomainInfo):
    """Create domain response: the stored domain."""


class CreateDomainUseCase:
    """Use case for registering a website domain."""

    def __init__(self, domain_service: DomainService, user_service: UserService) -> None:
        """Initialize create domain use case.

        Args:
            domain_service: Domain domain service
            user_service: User domain service
        """
        self.domain_service = domain_service
        self.user_service = user_service

    async def execute(self, request: CreateDomainRequest) -> CreateDomainResponse:
        """Execute create domain flow.

        Steps:
        1. Load the authenticated user
        2. Check the name is a second level domain pointing at us
        3. Store it, write the proxy routes, publish DomainAdded

        Raises:
            NotFoundError: If the user no longer exists
            ValidationError: If the name or its DNS is invalid
            ConflictError: If the domain is already registered
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        domain = await self.domain_service.create_domain(user, request.name)
        return CreateDomainResponse(**DomainInfo.from_domain(domain).model_dump())
