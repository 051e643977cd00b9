"""Unit tests for the global error handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from ideabox.domain.error import (
    ConflictError,
    DomainError,
    InternalFailureError,
    NotAuthorizedError,
    NotFoundError,
    TokenExpiredError,
    ValidationError,
)
from ideabox.interface.api.error_handlers import register_error_handlers, status_for
from ideabox.util.jwt import JWTError


class _SubclassedNotFound(NotFoundError):
    pass


@pytest.mark.parametrize(
    "error,expected",
    [
        (NotFoundError("Idea", "1"), 404),
        (TokenExpiredError(), 410),
        (NotAuthorizedError(message="nope"), 401),
        (ConflictError("email", "a@b.com"), 409),
        (ValidationError("bad"), 400),
        (InternalFailureError(), 500),
        (_SubclassedNotFound("Idea", "1"), 404),
        (DomainError("unclassified"), 500),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


class _Body(BaseModel):
    count: int


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        errors = {
            "conflict": ConflictError("email", "a@b.com"),
            "expired": TokenExpiredError(),
            "internal": InternalFailureError(),
            "jwt": JWTError("Token has expired"),
            "value": ValueError("badly formed hexadecimal UUID string"),
        }
        raise errors[kind]

    @app.post("/body")
    async def body(request: _Body):
        return {"count": request.count}

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret connection string")

    return TestClient(app, raise_server_exceptions=False)


class TestErrorResponses:
    """Status codes and bodies."""

    def test_conflict_names_field(self, client):
        response = client.get("/raise/conflict")

        assert response.status_code == 409
        assert response.json() == {"detail": "email 'a@b.com' already exists"}

    def test_expired_token_is_gone(self, client):
        assert client.get("/raise/expired").status_code == 410

    def test_internal_failure_is_opaque(self, client):
        response = client.get("/raise/internal")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_jwt_error_is_unauthorized(self, client):
        assert client.get("/raise/jwt").status_code == 401

    def test_value_error_is_bad_request_with_fixed_detail(self, client):
        response = client.get("/raise/value")

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid value"}
        assert "hexadecimal" not in response.text

    def test_request_validation_is_bad_request(self, client):
        response = client.post("/body", json={"count": "many"})

        assert response.status_code == 400
        assert response.json()["detail"].startswith("count:")

    def test_unhandled_exception_hides_details(self, client):
        response = client.get("/crash")

        assert response.status_code == 500
        assert "secret" not in response.text
