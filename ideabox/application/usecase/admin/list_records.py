"""Admin listing use case."""

from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel

from ideabox.application.usecase.common import DomainInfo, IdeaInfo, UserInfo, VoteInfo
from ideabox.domain.error import NotAuthorizedError
from ideabox.domain.service import DomainService, IdeaService, UserService, VoteService
from ideabox.domain.value import UserId


class RecordKind(str, Enum):
    """Listable record kinds."""

    USERS = "users"
    DOMAINS = "domains"
    IDEAS = "ideas"
    VOTES = "votes"


class ListRecordsRequest(BaseModel):
    """Admin listing request.

    ``deleted_only`` wins over ``include_deleted``.
    """

    actor_id: str  # User ID from authenticated user
    kind: RecordKind
    include_deleted: bool = False
    deleted_only: bool = False


class ListRecordsResponse(BaseModel):
    """Admin listing response. Only the list matching the kind is filled."""

    users: list[UserInfo] = []
    domains: list[DomainInfo] = []
    ideas: list[IdeaInfo] = []
    votes: list[VoteInfo] = []


class ListRecordsUseCase:
    """Use case for admins listing records, including soft-deleted ones."""

    def __init__(
        self,
        user_service: UserService,
        domain_service: DomainService,
        idea_service: IdeaService,
        vote_service: VoteService,
    ) -> None:
        self.user_service = user_service
        self.domain_service = domain_service
        self.idea_service = idea_service
        self.vote_service = vote_service

    async def execute(self, request: ListRecordsRequest) -> ListRecordsResponse:
        """List records of one kind.

        Raises:
            NotAuthorizedError: If the actor is not an admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        if not actor.is_admin():
            logfire.warn("Non-admin listing attempt", actor_id=request.actor_id)
            raise NotAuthorizedError(message="Admin role required")

        services = {
            RecordKind.USERS: self.user_service,
            RecordKind.DOMAINS: self.domain_service,
            RecordKind.IDEAS: self.idea_service,
            RecordKind.VOTES: self.vote_service,
        }
        service = services[request.kind]
        if request.deleted_only:
            records = await service.list_deleted()
        else:
            records = await service.list_all(include_deleted=request.include_deleted)

        if request.kind == RecordKind.USERS:
            return ListRecordsResponse(users=[UserInfo.from_user(r) for r in records])
        if request.kind == RecordKind.DOMAINS:
            return ListRecordsResponse(
                domains=[DomainInfo.from_domain(r) for r in records]
            )
        if request.kind == RecordKind.IDEAS:
            return ListRecordsResponse(ideas=[IdeaInfo.from_idea(r) for r in records])
        return ListRecordsResponse(votes=[VoteInfo.from_vote(r) for r in records])
