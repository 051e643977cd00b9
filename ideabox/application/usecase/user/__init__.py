"""User use cases."""

from .delete_me import DeleteMeRequest, DeleteMeUseCase
from .update_me import UpdateMeRequest, UpdateMeResponse, UpdateMeUseCase

__all__ = [
    "DeleteMeRequest",
    "DeleteMeUseCase",
    "UpdateMeRequest",
    "UpdateMeResponse",
    "UpdateMeUseCase",
]
