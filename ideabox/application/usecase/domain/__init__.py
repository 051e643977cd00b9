"""Domain use cases."""

from .create_domain import CreateDomainRequest, CreateDomainResponse, CreateDomainUseCase
from .delete_domain import DeleteDomainRequest, DeleteDomainUseCase
from .get_domain import (
    GetDomainByNameRequest,
    GetDomainByNameUseCase,
    GetDomainRequest,
    GetDomainResponse,
    GetDomainUseCase,
)
from .list_user_domains import (
    ListUserDomainsRequest,
    ListUserDomainsResponse,
    ListUserDomainsUseCase,
)
from .update_domain import UpdateDomainRequest, UpdateDomainResponse, UpdateDomainUseCase

__all__ = [
    "CreateDomainRequest",
    "CreateDomainResponse",
    "CreateDomainUseCase",
    "DeleteDomainRequest",
    "DeleteDomainUseCase",
    "GetDomainByNameRequest",
    "GetDomainByNameUseCase",
    "GetDomainRequest",
    "GetDomainResponse",
    "GetDomainUseCase",
    "ListUserDomainsRequest",
    "ListUserDomainsResponse",
    "ListUserDomainsUseCase",
    "UpdateDomainRequest",
    "UpdateDomainResponse",
    "UpdateDomainUseCase",
]
