"""Integration tests for the PostgreSQL vote and idea repositories.

These tests need a migrated Postgres (DATABASE__URL) and are skipped without
one. Every test works on freshly generated users and domains, so they can
run against a shared database.
"""

import os
from uuid import uuid4

import pytest

from ideabox.domain.error import ConflictError
from ideabox.domain.model import Domain, Idea, User, Vote
from ideabox.domain.repository import (
    DomainRepository,
    IdeaRepository,
    UserRepository,
    VoteRepository,
)
from ideabox.domain.value import DomainId, DomainName, IdeaId, UserId, VoteId, VoteType
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="needs a Postgres database"
)

integration_env = create_env_fixture(unmock={"persistence"})


async def _seed(env) -> tuple[User, Idea]:
    suffix = uuid4().hex[:8]
    user = await (await env.get(UserRepository)).save(
        User(
            id=UserId(uuid4()),
            username=f"user{suffix}",
            normalized_username=f"user{suffix}",
            email=f"{suffix}@example.com",
            normalized_email=f"{suffix}@example.com",
        )
    )
    domain = await (await env.get(DomainRepository)).save(
        Domain(
            id=DomainId(uuid4()),
            name=DomainName(f"site{suffix}.com"),
            user_id=user.id,
        )
    )
    idea = await (await env.get(IdeaRepository)).save(
        Idea(
            id=IdeaId(uuid4()),
            headline="Dark mode",
            user_id=user.id,
            domain_id=domain.id,
        )
    )
    return user, idea


class TestVoteRepositoryIntegration:
    """PostgresVoteRepository against a real database."""

    @pytest.mark.asyncio
    async def test_second_active_vote_conflicts(self, integration_env):
        """The partial unique index rejects a second active vote."""
        vote_repository = await integration_env.get(VoteRepository)
        user, idea = await _seed(integration_env)
        await vote_repository.create(
            Vote(id=VoteId(uuid4()), user_id=user.id, idea_id=idea.id, type=VoteType.UP)
        )

        with pytest.raises(ConflictError) as exc_info:
            await vote_repository.create(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=user.id,
                    idea_id=idea.id,
                    type=VoteType.DOWN,
                )
            )

        assert exc_info.value.field == "idea_id"
        # The savepoint keeps the session usable
        active = await vote_repository.find_active_by_user_and_idea(user.id, idea.id)
        assert active is not None and active.type == VoteType.UP

    @pytest.mark.asyncio
    async def test_rank_counts_active_votes_only(self, integration_env):
        vote_repository = await integration_env.get(VoteRepository)
        idea_repository = await integration_env.get(IdeaRepository)
        user, idea = await _seed(integration_env)
        vote = await vote_repository.create(
            Vote(id=VoteId(uuid4()), user_id=user.id, idea_id=idea.id, type=VoteType.UP)
        )

        ranked = await idea_repository.rank_by_domain(idea.domain_id, 10, 0)
        assert [(r.id, r.score) for r in ranked] == [(idea.id, 1)]

        await vote_repository.soft_delete(vote.id)
        ranked = await idea_repository.rank_by_domain(idea.domain_id, 10, 0)
        assert [(r.id, r.score) for r in ranked] == [(idea.id, 0)]
