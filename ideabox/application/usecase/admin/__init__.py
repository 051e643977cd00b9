"""Admin use cases."""

from .list_records import (
    ListRecordsRequest,
    ListRecordsResponse,
    ListRecordsUseCase,
    RecordKind,
)

__all__ = [
    "ListRecordsRequest",
    "ListRecordsResponse",
    "ListRecordsUseCase",
    "RecordKind",
]
