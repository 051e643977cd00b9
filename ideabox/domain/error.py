"""Domain layer errors.

Every error raised by a domain service belongs to this hierarchy, and the API
layer maps each class to one HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TokenExpiredError(DomainError):
    """Raised when an e-mail token is redeemed after its validity window."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a record they don't own and isn't an admin."""

    def __init__(
        self,
        resource: str | None = None,
        resource_id: str | None = None,
        user_id: str | None = None,
        message: str | None = None,
    ):
        if message is None:
            message = (
                f"User {user_id} is not authorized to modify {resource} {resource_id}"
            )
        super().__init__(message)


class ConflictError(DomainError):
    """Raised on a unique constraint violation.

    The message names the offending field, e.g. "email 'a@b.com' already exists".
    """

    def __init__(self, field: str, value: str | None = None):
        self.field = field
        self.value = value
        if value is None:
            super().__init__(f"{field} already exists")
        else:
            super().__init__(f"{field} '{value}' already exists")


class InternalFailureError(DomainError):
    """Persistence or dependency failure.

    The message is safe to show to clients; details go to the logs only.
    """

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
