"""Vote domain service."""

from uuid import uuid4

import logfire

from ideabox.domain.error import (
    ConflictError,
    InternalFailureError,
    NotFoundError,
    ValidationError,
)
from ideabox.domain.event import EventPublisher, VoteCreated
from ideabox.domain.model import User, Vote
from ideabox.domain.repository import VoteRepository
from ideabox.domain.value import IdeaId, UserId, VoteId, VoteType

from .base import Service
from .idea_service import IdeaService


class VoteService(Service):
    """Domain service for vote operations.

    Submitting a vote follows a three-way rule on the caller's active vote
    for the idea: none creates one, the same direction toggles it to
    REMOVED, any other direction flips it. Scores are never stored; the
    ranking query derives them.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        idea_service: IdeaService,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            idea_service: Idea domain service
            event_publisher: Outbound channel for VoteCreated events
        """
        self.vote_repository = vote_repository
        self.idea_service = idea_service
        self.event_publisher = event_publisher

    @staticmethod
    def next_vote_type(current: VoteType, direction: VoteType) -> VoteType:
        """Type a stored vote takes when its owner submits ``direction``."""
        if current == direction:
            return VoteType.REMOVED
        return direction

    async def submit_vote(
        self, idea_id: IdeaId, user_id: UserId, direction: VoteType
    ) -> Vote:
        """Vote on an idea.

        Args:
            idea_id: Idea ID (must reference an active idea)
            user_id: Voting user's ID
            direction: UP or DOWN

        Returns:
            The created or updated vote (possibly in REMOVED state)

        Raises:
            ValidationError: If direction is REMOVED
            NotFoundError: If the idea doesn't exist
        """
        with logfire.span(
            "vote_service.submit_vote",
            idea_id=str(idea_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            if direction == VoteType.REMOVED:
                raise ValidationError("Vote direction must be 'up' or 'down'")

            await self.idea_service.get_idea(idea_id)

            existing = await self.vote_repository.find_active_by_user_and_idea(
                user_id, idea_id
            )
            if existing:
                return await self._apply_direction(existing, direction)

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                idea_id=idea_id,
                type=direction,
            )

            try:
                saved_vote = await self.vote_repository.create(vote)
            except ConflictError:
                # A concurrent submission inserted the vote first; its row wins
                # and ours counts as a second submission against it.
                logfire.warn(
                    "Concurrent vote creation", user_id=str(user_id), idea_id=str(idea_id)
                )
                existing = await self.vote_repository.find_active_by_user_and_idea(
                    user_id, idea_id
                )
                if not existing:
                    raise InternalFailureError()
                return await self._apply_direction(existing, direction)

            self.event_publisher.publish(VoteCreated(vote=saved_vote))
            logfire.info(
                "Vote created",
                vote_id=str(saved_vote.id),
                vote_type=saved_vote.type.value,
            )
            return saved_vote

    async def _apply_direction(self, vote: Vote, direction: VoteType) -> Vote:
        """Toggle or flip an existing vote."""
        updated = vote.with_type(self.next_vote_type(vote.type, direction))
        saved = await self.vote_repository.update(updated)
        logfire.info(
            "Vote updated",
            vote_id=str(saved.id),
            previous_type=vote.type.value,
            vote_type=saved.type.value,
        )
        return saved

    async def get_vote(self, vote_id: VoteId) -> Vote:
        """Get an active vote by ID.

        Raises:
            NotFoundError: If vote not found
        """
        vote = await self.vote_repository.find_by_id(vote_id)
        if not vote:
            raise NotFoundError("Vote", str(vote_id))
        return vote

    async def list_votes_for_idea(self, idea_id: IdeaId) -> list[Vote]:
        """Active votes on an idea."""
        return await self.vote_repository.find_by_idea(idea_id, include_deleted=False)

    async def list_votes_for_user(self, user_id: UserId) -> list[Vote]:
        """Active votes cast by a user."""
        return await self.vote_repository.find_by_user(user_id, include_deleted=False)

    async def list_all(self, include_deleted: bool = False) -> list[Vote]:
        """All votes, optionally including soft-deleted ones."""
        return await self.vote_repository.find_all(include_deleted=include_deleted)

    async def list_deleted(self) -> list[Vote]:
        """Soft-deleted votes only."""
        return await self.vote_repository.find_deleted()

    async def update_vote(
        self, actor: User, vote_id: VoteId, vote_type: VoteType
    ) -> Vote:
        """Set a vote's type directly.

        Raises:
            NotFoundError: If vote not found
            NotAuthorizedError: If actor is neither owner nor admin
        """
        with logfire.span(
            "vote_service.update_vote", vote_id=str(vote_id), actor_id=str(actor.id)
        ):
            vote = await self.get_vote(vote_id)
            self.ensure_can_modify(actor, vote.user_id, "vote", str(vote_id))

            if vote.type == vote_type:
                return vote

            saved = await self.vote_repository.update(vote.with_type(vote_type))
            logfire.info("Vote updated", vote_id=str(vote_id), vote_type=vote_type.value)
            return saved

    async def delete_vote(self, actor: User, vote_id: VoteId) -> None:
        """Soft-delete a vote.

        Raises:
            NotFoundError: If vote not found
            NotAuthorizedError: If actor is neither owner nor admin
            InternalFailureError: If no row was deleted
        """
        with logfire.span(
            "vote_service.delete_vote", vote_id=str(vote_id), actor_id=str(actor.id)
        ):
            vote = await self.get_vote(vote_id)
            self.ensure_can_modify(actor, vote.user_id, "vote", str(vote_id))

            affected = await self.vote_repository.soft_delete(vote_id)
            self.ensure_affected(affected, "vote", str(vote_id))
            logfire.info("Vote deleted", vote_id=str(vote_id))
