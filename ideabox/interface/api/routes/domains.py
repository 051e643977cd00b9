"""Domain routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from ideabox.application.usecase.auth import GetCurrentUserUseCase
from ideabox.application.usecase.domain import (
    CreateDomainRequest,
    CreateDomainResponse,
    CreateDomainUseCase,
    DeleteDomainRequest,
    DeleteDomainUseCase,
    GetDomainByNameRequest,
    GetDomainByNameUseCase,
    GetDomainRequest,
    GetDomainResponse,
    GetDomainUseCase,
    ListUserDomainsRequest,
    ListUserDomainsResponse,
    ListUserDomainsUseCase,
    UpdateDomainRequest,
    UpdateDomainResponse,
    UpdateDomainUseCase,
)
from ideabox.application.usecase.idea import (
    RankIdeasRequest,
    RankIdeasResponse,
    RankIdeasUseCase,
)
from ideabox.domain.service.idea_service import DEFAULT_RANK_LIMIT

from .common import require_user

router = APIRouter(prefix="/domains", tags=["domains"], route_class=DishkaRoute)


class CreateDomainAPIRequest(BaseModel):
    """API request for registering a domain."""

    name: str


class UpdateDomainAPIRequest(BaseModel):
    """API request for editing a domain."""

    name: str | None = None
    has_verified_dns: bool | None = None
    last_verified_dns: datetime | None = None


@router.post(
    "", response_model=CreateDomainResponse, status_code=status.HTTP_201_CREATED
)
async def create_domain(
    request: CreateDomainAPIRequest,
    create_domain_use_case: FromDishka[CreateDomainUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateDomainResponse:
    """Register a second level domain.

    Its A record must already point at our proxy. Requires authentication.

    Example:
        POST /domains
        {"name": "example.com"}
    """
    user = await require_user(get_current_user_use_case, auth_token)
    return await create_domain_use_case.execute(
        CreateDomainRequest(name=request.name, user_id=user.user_id)
    )


@router.get("", response_model=ListUserDomainsResponse)
async def list_domains(
    list_user_domains_use_case: FromDishka[ListUserDomainsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    user_id: UUID | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListUserDomainsResponse:
    """List a user's domains; the signed-in user's when user_id is omitted."""
    if user_id is None:
        user = await require_user(get_current_user_use_case, auth_token)
        owner_id = user.user_id
    else:
        owner_id = str(user_id)
    return await list_user_domains_use_case.execute(
        ListUserDomainsRequest(user_id=owner_id)
    )


@router.get("/lookup", response_model=GetDomainResponse)
async def get_domain_by_name(
    get_domain_by_name_use_case: FromDishka[GetDomainByNameUseCase],
    name: str = Query(min_length=1),
) -> GetDomainResponse:
    """Resolve a host name (``example.com`` or ``www.example.com``) to its domain."""
    return await get_domain_by_name_use_case.execute(GetDomainByNameRequest(name=name))


@router.get("/{domain_id}", response_model=GetDomainResponse)
async def get_domain(
    domain_id: UUID,
    get_domain_use_case: FromDishka[GetDomainUseCase],
) -> GetDomainResponse:
    """Get a domain by ID."""
    return await get_domain_use_case.execute(GetDomainRequest(domain_id=str(domain_id)))


@router.patch("/{domain_id}", response_model=UpdateDomainResponse)
async def update_domain(
    domain_id: UUID,
    request: UpdateDomainAPIRequest,
    update_domain_use_case: FromDishka[UpdateDomainUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateDomainResponse:
    """Edit a domain. Only the owner or an admin can edit."""
    user = await require_user(get_current_user_use_case, auth_token)
    return await update_domain_use_case.execute(
        UpdateDomainRequest(
            domain_id=str(domain_id),
            actor_id=user.user_id,
            name=request.name,
            has_verified_dns=request.has_verified_dns,
            last_verified_dns=request.last_verified_dns,
        )
    )


@router.delete("/{domain_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_domain(
    domain_id: UUID,
    delete_domain_use_case: FromDishka[DeleteDomainUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete a domain. Only the owner or an admin can delete."""
    user = await require_user(get_current_user_use_case, auth_token)
    await delete_domain_use_case.execute(
        DeleteDomainRequest(domain_id=str(domain_id), actor_id=user.user_id)
    )


@router.get("/{domain_id}/ideas", response_model=RankIdeasResponse)
async def rank_ideas(
    domain_id: UUID,
    rank_ideas_use_case: FromDishka[RankIdeasUseCase],
    limit: int = DEFAULT_RANK_LIMIT,
    offset: int = 0,
) -> RankIdeasResponse:
    """List a domain's ideas by vote score, highest first.

    Ideas without votes score 0. Ties go to the older idea.

    Example:
        GET /domains/{domain_id}/ideas?limit=10&offset=0

        Response:
        {"ideas": [{"idea_id": "...", "headline": "Dark mode", "score": 3, ...}]}
    """
    return await rank_ideas_use_case.execute(
        RankIdeasRequest(domain_id=str(domain_id), limit=limit, offset=offset)
    )
