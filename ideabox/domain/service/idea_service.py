"""Idea domain service."""

from uuid import uuid4

import logfire

from ideabox.domain.error import NotFoundError, ValidationError
from ideabox.domain.event import EventPublisher, IdeaAdded
from ideabox.domain.model import Idea, RankedIdea, User
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import IdeaRepository
from ideabox.domain.value import DomainId, IdeaId

from .base import Service
from .domain_service import DomainService

DEFAULT_RANK_LIMIT = 30
MAX_RANK_LIMIT = 100


class IdeaService(Service):
    """Domain service for idea operations."""

    def __init__(
        self,
        idea_repository: IdeaRepository,
        domain_service: DomainService,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize idea service.

        Args:
            idea_repository: Idea repository
            domain_service: Domain service, used to check the target domain
            event_publisher: Outbound channel for IdeaAdded events
        """
        self.idea_repository = idea_repository
        self.domain_service = domain_service
        self.event_publisher = event_publisher

    async def create_idea(
        self,
        user: User,
        domain_id: DomainId,
        headline: str,
        description: str | None = None,
    ) -> Idea:
        """Post an idea for a domain.

        Raises:
            NotFoundError: If the domain doesn't exist
        """
        with logfire.span(
            "idea_service.create_idea", user_id=str(user.id), domain_id=str(domain_id)
        ):
            await self.domain_service.get_domain(domain_id)

            idea = Idea(
                id=IdeaId(uuid4()),
                headline=headline,
                description=description,
                user_id=user.id,
                domain_id=domain_id,
            )
            saved = await self.idea_repository.save(idea)

            self.event_publisher.publish(IdeaAdded(idea=saved))
            logfire.info("Idea created", idea_id=str(saved.id))
            return saved

    async def get_idea(self, idea_id: IdeaId) -> Idea:
        """Get an active idea.

        Raises:
            NotFoundError: If the idea doesn't exist or was deleted
        """
        idea = await self.idea_repository.find_by_id(idea_id)
        if not idea:
            logfire.warn("Idea not found", idea_id=str(idea_id))
            raise NotFoundError("Idea", str(idea_id))
        return idea

    async def list_all(self, include_deleted: bool = False) -> list[Idea]:
        """All ideas, optionally including soft-deleted ones."""
        return await self.idea_repository.find_all(include_deleted=include_deleted)

    async def list_deleted(self) -> list[Idea]:
        """Soft-deleted ideas only."""
        return await self.idea_repository.find_deleted()

    async def update_idea(
        self,
        actor: User,
        idea_id: IdeaId,
        headline: str | None = None,
        description: str | None = None,
    ) -> Idea:
        """Edit an idea's headline or description.

        Raises:
            NotFoundError: If the idea doesn't exist
            NotAuthorizedError: If actor is neither owner nor admin
        """
        with logfire.span(
            "idea_service.update_idea", idea_id=str(idea_id), actor_id=str(actor.id)
        ):
            idea = await self.get_idea(idea_id)
            self.ensure_can_modify(actor, idea.user_id, "idea", str(idea_id))

            updates: dict = {"updated_at": utcnow()}
            if headline is not None:
                updates["headline"] = headline
            if description is not None:
                updates["description"] = description

            # model_copy skips validation, so rebuild to check the headline
            updated = Idea.model_validate({**idea.model_dump(), **updates})
            saved = await self.idea_repository.save(updated)
            logfire.info("Idea updated", idea_id=str(idea_id))
            return saved

    async def delete_idea(self, actor: User, idea_id: IdeaId) -> None:
        """Soft-delete an idea.

        Raises:
            NotFoundError: If the idea doesn't exist
            NotAuthorizedError: If actor is neither owner nor admin
        """
        with logfire.span(
            "idea_service.delete_idea", idea_id=str(idea_id), actor_id=str(actor.id)
        ):
            idea = await self.get_idea(idea_id)
            self.ensure_can_modify(actor, idea.user_id, "idea", str(idea_id))

            affected = await self.idea_repository.soft_delete(idea_id)
            self.ensure_affected(affected, "idea", str(idea_id))
            logfire.info("Idea deleted", idea_id=str(idea_id))

    async def rank_ideas_for_domain(
        self,
        domain_id: DomainId,
        limit: int = DEFAULT_RANK_LIMIT,
        offset: int = 0,
    ) -> list[RankedIdea]:
        """Rank a domain's active ideas by vote score, highest first.

        Ideas nobody voted on score 0 and are still listed.

        Args:
            domain_id: Domain ID
            limit: Page size, 0 to MAX_RANK_LIMIT
            offset: Number of ranked ideas to skip

        Returns:
            Ranked page, empty if the domain has no ideas

        Raises:
            ValidationError: If limit or offset is out of range
        """
        with logfire.span(
            "idea_service.rank_ideas_for_domain",
            domain_id=str(domain_id),
            limit=limit,
            offset=offset,
        ):
            if limit < 0 or limit > MAX_RANK_LIMIT:
                raise ValidationError(f"limit must be between 0 and {MAX_RANK_LIMIT}")
            if offset < 0:
                raise ValidationError("offset must not be negative")

            ranked = await self.idea_repository.rank_by_domain(domain_id, limit, offset)
            logfire.info("Ideas ranked", domain_id=str(domain_id), count=len(ranked))
            return ranked
