"""Idea use cases."""

from .create_idea import CreateIdeaRequest, CreateIdeaResponse, CreateIdeaUseCase
from .delete_idea import DeleteIdeaRequest, DeleteIdeaUseCase
from .get_idea import GetIdeaRequest, GetIdeaResponse, GetIdeaUseCase
from .rank_ideas import RankIdeasRequest, RankIdeasResponse, RankIdeasUseCase
from .update_idea import UpdateIdeaRequest, UpdateIdeaResponse, UpdateIdeaUseCase

__all__ = [
    "CreateIdeaRequest",
    "CreateIdeaResponse",
    "CreateIdeaUseCase",
    "DeleteIdeaRequest",
    "DeleteIdeaUseCase",
    "GetIdeaRequest",
    "GetIdeaResponse",
    "GetIdeaUseCase",
    "RankIdeasRequest",
    "RankIdeasResponse",
    "RankIdeasUseCase",
    "UpdateIdeaRequest",
    "UpdateIdeaResponse",
    "UpdateIdeaUseCase",
]
