"""Account routes for the signed-in user."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from ideabox.application.usecase.auth import GetCurrentUserUseCase
from ideabox.application.usecase.auth.get_current_user import GetCurrentUserResponse
from ideabox.application.usecase.user import (
    DeleteMeRequest,
    DeleteMeUseCase,
    UpdateMeRequest,
    UpdateMeResponse,
    UpdateMeUseCase,
)
from ideabox.config import Settings

from .common import clear_auth_cookie, require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateMeAPIRequest(BaseModel):
    """API request for editing the own account."""

    username: str | None = None
    email: str | None = None
    old_password: str | None = None
    new_password: str | None = None


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the signed-in user. Requires authentication."""
    return await require_user(get_current_user_use_case, auth_token)


@router.patch("/me", response_model=UpdateMeResponse)
async def update_me(
    request: UpdateMeAPIRequest,
    update_me_use_case: FromDishka[UpdateMeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateMeResponse:
    """Edit username, e-mail or password.

    Changing the password needs both old_password and new_password.
    Changing the e-mail marks it unverified again.
    """
    user = await require_user(get_current_user_use_case, auth_token)
    return await update_me_use_case.execute(
        UpdateMeRequest(
            user_id=user.user_id,
            username=request.username,
            email=request.email,
            old_password=request.old_password,
            new_password=request.new_password,
        )
    )


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me(
    response: Response,
    delete_me_use_case: FromDishka[DeleteMeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete the own account and sign out."""
    user = await require_user(get_current_user_use_case, auth_token)
    await delete_me_use_case.execute(DeleteMeRequest(user_id=user.user_id))
    clear_auth_cookie(response, settings)
