"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from ideabox.adapter.event import RecordingEventPublisher
from ideabox.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from ideabox.domain.event import VoteCreated
from ideabox.domain.repository import UserRepository
from ideabox.domain.service import (
    DomainService,
    IdeaService,
    UserService,
    VoteService,
)
from ideabox.domain.value import IdeaId, VoteId, VoteType
from ideabox.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_admin, make_domain, make_idea, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env):
    user_service = await unit_env.get(UserService)
    domain_service = await unit_env.get(DomainService)
    idea_service = await unit_env.get(IdeaService)

    owner = await make_user(user_service, "owner")
    domain = await make_domain(domain_service, owner)
    idea = await make_idea(idea_service, owner, domain)
    return owner, idea


class TestSubmitVote:
    """Tests for the toggle rule of VoteService.submit_vote."""

    @pytest.mark.asyncio
    async def test_first_vote_is_created(self, unit_env):
        """A user without an active vote gets a new one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)

        # Act
        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        # Assert
        assert vote.type == VoteType.UP
        assert vote.user_id == user.id
        assert vote.idea_id == idea.id

    @pytest.mark.asyncio
    async def test_same_direction_toggles_vote_off(self, unit_env):
        """Repeating the same direction leaves the vote REMOVED."""
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)
        first = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        second = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        assert second.id == first.id
        assert second.type == VoteType.REMOVED

    @pytest.mark.asyncio
    async def test_opposite_direction_flips_vote(self, unit_env):
        """UP then DOWN flips the same vote record."""
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)
        first = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        second = await vote_service.submit_vote(idea.id, user.id, VoteType.DOWN)

        assert second.id == first.id
        assert second.type == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_removed_vote_comes_back(self, unit_env):
        """A REMOVED vote takes the next submitted direction."""
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)
        await vote_service.submit_vote(idea.id, user.id, VoteType.DOWN)
        await vote_service.submit_vote(idea.id, user.id, VoteType.DOWN)

        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        assert vote.type == VoteType.UP
        votes = await vote_service.list_votes_for_idea(idea.id)
        assert len(votes) == 1

    @pytest.mark.asyncio
    async def test_removed_direction_is_rejected(self, unit_env):
        """Only UP and DOWN may be submitted."""
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)

        with pytest.raises(ValidationError):
            await vote_service.submit_vote(idea.id, user.id, VoteType.REMOVED)

    @pytest.mark.asyncio
    async def test_unknown_idea(self, unit_env):
        """Voting on a missing idea raises NotFoundError and stores nothing."""
        vote_service = await unit_env.get(VoteService)
        user, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await vote_service.submit_vote(IdeaId(uuid4()), user.id, VoteType.UP)

        assert await vote_service.list_votes_for_user(user.id) == []

    @pytest.mark.asyncio
    async def test_deleted_idea_cannot_be_voted_on(self, unit_env):
        """Soft-deleted ideas are not found."""
        vote_service = await unit_env.get(VoteService)
        idea_service = await unit_env.get(IdeaService)
        user, idea = await _setup(unit_env)
        await idea_service.delete_idea(user, idea.id)

        with pytest.raises(NotFoundError):
            await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

    @pytest.mark.asyncio
    async def test_vote_created_event_only_on_creation(self, unit_env):
        """Toggles and flips publish nothing."""
        vote_service = await unit_env.get(VoteService)
        publisher = await unit_env.get(RecordingEventPublisher)
        user, idea = await _setup(unit_env)

        await vote_service.submit_vote(idea.id, user.id, VoteType.UP)
        await vote_service.submit_vote(idea.id, user.id, VoteType.DOWN)
        await vote_service.submit_vote(idea.id, user.id, VoteType.DOWN)

        events = publisher.of_type(VoteCreated)
        assert len(events) == 1
        assert events[0].vote.type == VoteType.UP


class _RacingVoteRepository(InMemoryVoteRepository):
    """Lets a concurrent submission win the insert right before ours."""

    def __init__(self, rival_type: VoteType) -> None:
        super().__init__()
        self.rival_type = rival_type

    async def create(self, vote):
        rival = vote.model_copy(update={"id": VoteId(uuid4()), "type": self.rival_type})
        await super().create(rival)
        raise ConflictError("idea_id", str(vote.idea_id))


class TestConcurrentSubmission:
    """Losing the insert race applies the toggle rule to the winning row."""

    @pytest.mark.asyncio
    async def test_same_direction_race_toggles_winner(self, unit_env):
        """Two UP submissions leave one REMOVED vote."""
        user, idea = await _setup(unit_env)
        vote_repository = _RacingVoteRepository(rival_type=VoteType.UP)
        vote_service = VoteService(
            vote_repository=vote_repository,
            idea_service=await unit_env.get(IdeaService),
            event_publisher=RecordingEventPublisher(),
        )

        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        assert vote.type == VoteType.REMOVED
        assert len(await vote_repository.find_by_idea(idea.id)) == 1

    @pytest.mark.asyncio
    async def test_opposite_direction_race_flips_winner(self, unit_env):
        """UP racing DOWN ends with the later direction."""
        user, idea = await _setup(unit_env)
        publisher = RecordingEventPublisher()
        vote_service = VoteService(
            vote_repository=_RacingVoteRepository(rival_type=VoteType.UP),
            idea_service=await unit_env.get(IdeaService),
            event_publisher=publisher,
        )

        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.DOWN)

        assert vote.type == VoteType.DOWN
        assert publisher.events == []


class TestVoteAdministration:
    """Tests for direct vote edits and deletion."""

    @pytest.mark.asyncio
    async def test_owner_updates_vote_type(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)
        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        updated = await vote_service.update_vote(user, vote.id, VoteType.REMOVED)

        assert updated.type == VoteType.REMOVED

    @pytest.mark.asyncio
    async def test_other_user_cannot_update_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user_service = await unit_env.get(UserService)
        user, idea = await _setup(unit_env)
        stranger = await make_user(user_service, "stranger")
        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        with pytest.raises(NotAuthorizedError):
            await vote_service.update_vote(stranger, vote.id, VoteType.DOWN)

    @pytest.mark.asyncio
    async def test_admin_deletes_any_vote(self, unit_env):
        """Deleted votes disappear from lookups and from listings."""
        vote_service = await unit_env.get(VoteService)
        user_service = await unit_env.get(UserService)
        user_repository = await unit_env.get(UserRepository)
        user, idea = await _setup(unit_env)
        admin = await make_admin(
            user_repository, await make_user(user_service, "admin")
        )
        vote = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        await vote_service.delete_vote(admin, vote.id)

        with pytest.raises(NotFoundError):
            await vote_service.get_vote(vote.id)
        assert [v.id for v in await vote_service.list_deleted()] == [vote.id]

    @pytest.mark.asyncio
    async def test_new_vote_after_deletion(self, unit_env):
        """A deleted vote frees the slot for a fresh one."""
        vote_service = await unit_env.get(VoteService)
        user, idea = await _setup(unit_env)
        old = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)
        await vote_service.delete_vote(user, old.id)

        new = await vote_service.submit_vote(idea.id, user.id, VoteType.UP)

        assert new.id != old.id
        assert new.type == VoteType.UP


def test_next_vote_type():
    """The toggle table."""
    assert VoteService.next_vote_type(VoteType.UP, VoteType.UP) == VoteType.REMOVED
    assert VoteService.next_vote_type(VoteType.UP, VoteType.DOWN) == VoteType.DOWN
    assert VoteService.next_vote_type(VoteType.DOWN, VoteType.DOWN) == VoteType.REMOVED
    assert VoteService.next_vote_type(VoteType.REMOVED, VoteType.UP) == VoteType.UP
