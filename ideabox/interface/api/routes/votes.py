"""Vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from ideabox.application.usecase.auth import GetCurrentUserUseCase
from ideabox.application.usecase.vote import (
    DeleteVoteRequest,
    DeleteVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
    UpdateVoteRequest,
    UpdateVoteResponse,
    UpdateVoteUseCase,
)
from ideabox.domain.value import VoteType

from .common import require_user

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class SubmitVoteAPIRequest(BaseModel):
    """API request for voting on an idea."""

    idea_id: UUID
    direction: VoteType


class UpdateVoteAPIRequest(BaseModel):
    """API request for setting a vote's type."""

    type: VoteType


@router.post("", response_model=SubmitVoteResponse)
async def submit_vote(
    request: SubmitVoteAPIRequest,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SubmitVoteResponse:
    """Vote up or down on an idea.

    Repeating the current direction removes the vote; the other direction
    flips it. Requires authentication.

    Example:
        POST /votes
        {"idea_id": "...", "direction": "up"}

        Response:
        {"vote_id": "...", "idea_id": "...", "type": "up", ...}
    """
    user = await require_user(get_current_user_use_case, auth_token)
    vote = await submit_vote_use_case.execute(
        SubmitVoteRequest(
            idea_id=str(request.idea_id),
            direction=request.direction,
            user_id=user.user_id,
        )
    )
    logfire.info("Vote submitted", vote_id=vote.vote_id, vote_type=vote.type.value)
    return vote


@router.get("", response_model=ListVotesResponse)
async def list_votes(
    list_votes_use_case: FromDishka[ListVotesUseCase],
    idea_id: UUID | None = None,
    user_id: UUID | None = None,
) -> ListVotesResponse:
    """List active votes on an idea or by a user (exactly one filter)."""
    return await list_votes_use_case.execute(
        ListVotesRequest(
            idea_id=str(idea_id) if idea_id else None,
            user_id=str(user_id) if user_id else None,
        )
    )


@router.get("/{vote_id}", response_model=GetVoteResponse)
async def get_vote(
    vote_id: UUID,
    get_vote_use_case: FromDishka[GetVoteUseCase],
) -> GetVoteResponse:
    """Get a vote by ID."""
    return await get_vote_use_case.execute(GetVoteRequest(vote_id=str(vote_id)))


@router.patch("/{vote_id}", response_model=UpdateVoteResponse)
async def update_vote(
    vote_id: UUID,
    request: UpdateVoteAPIRequest,
    update_vote_use_case: FromDishka[UpdateVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateVoteResponse:
    """Set a vote's type. Only the voter or an admin can edit."""
    user = await require_user(get_current_user_use_case, auth_token)
    return await update_vote_use_case.execute(
        UpdateVoteRequest(
            vote_id=str(vote_id), type=request.type, actor_id=user.user_id
        )
    )


@router.delete("/{vote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vote(
    vote_id: UUID,
    delete_vote_use_case: FromDishka[DeleteVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete a vote. Only the voter or an admin can delete."""
    user = await require_user(get_current_user_use_case, auth_token)
    await delete_vote_use_case.execute(
        DeleteVoteRequest(vote_id=str(vote_id), actor_id=user.user_id)
    )
