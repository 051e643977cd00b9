"""Unit tests for the vote use cases."""

import pydantic
import pytest

from ideabox.application.usecase.vote import (
    ListVotesRequest,
    ListVotesUseCase,
    SubmitVoteRequest,
    SubmitVoteUseCase,
)
from ideabox.domain.service import DomainService, IdeaService, UserService
from ideabox.domain.value import VoteType
from tests.conftest import make_domain, make_idea, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitVoteUseCase:
    """Tests for SubmitVoteUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_round_trip(self, unit_env):
        """up, up, down leaves a single DOWN vote."""
        use_case = await unit_env.get(SubmitVoteUseCase)
        list_votes = await unit_env.get(ListVotesUseCase)
        user = await make_user(await unit_env.get(UserService))
        domain = await make_domain(await unit_env.get(DomainService), user)
        idea = await make_idea(await unit_env.get(IdeaService), user, domain)

        def submit(direction: VoteType) -> SubmitVoteRequest:
            return SubmitVoteRequest(
                idea_id=str(idea.id), direction=direction, user_id=str(user.id)
            )

        first = await use_case.execute(submit(VoteType.UP))
        second = await use_case.execute(submit(VoteType.UP))
        third = await use_case.execute(submit(VoteType.DOWN))

        assert (first.type, second.type, third.type) == (
            VoteType.UP,
            VoteType.REMOVED,
            VoteType.DOWN,
        )
        listed = await list_votes.execute(ListVotesRequest(user_id=str(user.id)))
        assert [v.vote_id for v in listed.votes] == [first.vote_id]


class TestListVotesRequest:
    """Filter validation."""

    def test_needs_a_filter(self):
        with pytest.raises(pydantic.ValidationError):
            ListVotesRequest()

    def test_rejects_both_filters(self):
        with pytest.raises(pydantic.ValidationError):
            ListVotesRequest(idea_id="a", user_id="b")
