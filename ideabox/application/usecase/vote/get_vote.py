"""Get and list vote use cases."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from ideabox.application.usecase.common import VoteInfo
from ideabox.domain.service import VoteService
from ideabox.domain.value import IdeaId, UserId, VoteId


class GetVoteRequest(BaseModel):
    """Get vote request."""

    vote_id: str


class GetVoteResponse(VoteInfo):
    """Get vote response."""


class GetVoteUseCase:
    """Use case for fetching a single vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        vote = await self.vote_service.get_vote(VoteId(UUID(request.vote_id)))
        return GetVoteResponse(**VoteInfo.from_vote(vote).model_dump())


class ListVotesRequest(BaseModel):
    """List votes request: by idea or by user, exactly one of them."""

    idea_id: str | None = None
    user_id: str | None = None

    @model_validator(mode="after")
    def exactly_one_filter(self) -> "ListVotesRequest":
        if (self.idea_id is None) == (self.user_id is None):
            raise ValueError("Provide exactly one of idea_id or user_id")
        return self


class ListVotesResponse(BaseModel):
    """List votes response."""

    votes: list[VoteInfo]


class ListVotesUseCase:
    """Use case for listing active votes on an idea or by a user."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        if request.idea_id is not None:
            votes = await self.vote_service.list_votes_for_idea(
                IdeaId(UUID(request.idea_id))
            )
        else:
            votes = await self.vote_service.list_votes_for_user(
                UserId(UUID(request.user_id))
            )
        return ListVotesResponse(votes=[VoteInfo.from_vote(v) for v in votes])
