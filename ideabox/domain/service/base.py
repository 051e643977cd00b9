"""Base service class for domain services."""

import logfire

from ideabox.domain.error import InternalFailureError, NotAuthorizedError
from ideabox.domain.model import User
from ideabox.domain.value import UserId


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def ensure_can_modify(
        actor: User, owner_id: UserId, resource: str, resource_id: str
    ) -> None:
        """Allow the owner of a record, or an admin, to modify it.

        Raises:
            NotAuthorizedError: If the actor is neither
        """
        if not actor.can_modify(owner_id):
            logfire.warn(
                "Unauthorized modification attempt",
                resource=resource,
                resource_id=resource_id,
                actor_id=str(actor.id),
            )
            raise NotAuthorizedError(resource, resource_id, str(actor.id))

    @staticmethod
    def ensure_affected(affected: int, resource: str, resource_id: str) -> None:
        """Treat a write that touched no row as an internal failure.

        Raises:
            InternalFailureError: If no row was affected
        """
        if not affected:
            logfire.error(
                "Write affected no rows", resource=resource, resource_id=resource_id
            )
            raise InternalFailureError()
