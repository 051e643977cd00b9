"""Admin routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from ideabox.application.usecase.admin import (
    ListRecordsRequest,
    ListRecordsResponse,
    ListRecordsUseCase,
    RecordKind,
)
from ideabox.application.usecase.auth import GetCurrentUserUseCase

from .common import require_user

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/{kind}", response_model=ListRecordsResponse)
async def list_records(
    kind: RecordKind,
    list_records_use_case: FromDishka[ListRecordsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    include_deleted: bool = False,
    deleted_only: bool = False,
    auth_token: str | None = Cookie(default=None),
) -> ListRecordsResponse:
    """List users, domains, ideas or votes, soft-deleted ones included on request.

    Admins only.

    Example:
        GET /admin/ideas?deleted_only=true
    """
    user = await require_user(get_current_user_use_case, auth_token)
    return await list_records_use_case.execute(
        ListRecordsRequest(
            actor_id=user.user_id,
            kind=kind,
            include_deleted=include_deleted,
            deleted_only=deleted_only,
        )
    )
