"""Idea routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from ideabox.application.usecase.auth import GetCurrentUserUseCase
from ideabox.application.usecase.idea import (
    CreateIdeaRequest,
    CreateIdeaResponse,
    CreateIdeaUseCase,
    DeleteIdeaRequest,
    DeleteIdeaUseCase,
    GetIdeaRequest,
    GetIdeaResponse,
    GetIdeaUseCase,
    UpdateIdeaRequest,
    UpdateIdeaResponse,
    UpdateIdeaUseCase,
)

from .common import require_user

router = APIRouter(prefix="/ideas", tags=["ideas"], route_class=DishkaRoute)


class CreateIdeaAPIRequest(BaseModel):
    """API request for posting an idea."""

    domain_id: UUID
    headline: str
    description: str | None = None


class UpdateIdeaAPIRequest(BaseModel):
    """API request for editing an idea."""

    headline: str | None = None
    description: str | None = None


@router.post("", response_model=CreateIdeaResponse, status_code=status.HTTP_201_CREATED)
async def create_idea(
    request: CreateIdeaAPIRequest,
    create_idea_use_case: FromDishka[CreateIdeaUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateIdeaResponse:
    """Post an idea on a domain. Requires authentication."""
    user = await require_user(get_current_user_use_case, auth_token)
    return await create_idea_use_case.execute(
        CreateIdeaRequest(
            domain_id=str(request.domain_id),
            headline=request.headline,
            description=request.description,
            user_id=user.user_id,
        )
    )


@router.get("/{idea_id}", response_model=GetIdeaResponse)
async def get_idea(
    idea_id: UUID,
    get_idea_use_case: FromDishka[GetIdeaUseCase],
) -> GetIdeaResponse:
    """Get an idea by ID."""
    return await get_idea_use_case.execute(GetIdeaRequest(idea_id=str(idea_id)))


@router.patch("/{idea_id}", response_model=UpdateIdeaResponse)
async def update_idea(
    idea_id: UUID,
    request: UpdateIdeaAPIRequest,
    update_idea_use_case: FromDishka[UpdateIdeaUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateIdeaResponse:
    """Edit an idea. Only the author or an admin can edit."""
    user = await require_user(get_current_user_use_case, auth_token)
    return await update_idea_use_case.execute(
        UpdateIdeaRequest(
            idea_id=str(idea_id),
            actor_id=user.user_id,
            headline=request.headline,
            description=request.description,
        )
    )


@router.delete("/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_idea(
    idea_id: UUID,
    delete_idea_use_case: FromDishka[DeleteIdeaUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete an idea. Only the author or an admin can delete."""
    user = await require_user(get_current_user_use_case, auth_token)
    await delete_idea_use_case.execute(
        DeleteIdeaRequest(idea_id=str(idea_id), actor_id=user.user_id)
    )
