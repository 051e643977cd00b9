"""Vote use cases."""

from .delete_vote import DeleteVoteRequest, DeleteVoteUseCase
from .get_vote import (
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
)
from .submit_vote import SubmitVoteRequest, SubmitVoteResponse, SubmitVoteUseCase
from .update_vote import UpdateVoteRequest, UpdateVoteResponse, UpdateVoteUseCase

__all__ = [
    "DeleteVoteRequest",
    "DeleteVoteUseCase",
    "GetVoteRequest",
    "GetVoteResponse",
    "GetVoteUseCase",
    "ListVotesRequest",
    "ListVotesResponse",
    "ListVotesUseCase",
    "SubmitVoteRequest",
    "SubmitVoteResponse",
    "SubmitVoteUseCase",
    "UpdateVoteRequest",
    "UpdateVoteResponse",
    "UpdateVoteUseCase",
]
