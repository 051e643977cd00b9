"""Global exception handlers.

Maps the domain error taxonomy to HTTP statuses. Responses use FastAPI's
``{"detail": ...}`` body and never carry internal details.
"""

import logging

import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ideabox.domain.error import (
    ConflictError,
    DomainError,
    InternalFailureError,
    NotAuthorizedError,
    NotFoundError,
    TokenExpiredError,
    ValidationError,
)
from ideabox.util.jwt import JWTError

logger = logging.getLogger(__name__)

INVALID_VALUE_DETAIL = "Invalid value"

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    TokenExpiredError: status.HTTP_410_GONE,
    NotAuthorizedError: status.HTTP_401_UNAUTHORIZED,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InternalFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error, walking its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        code = status_for(exc)
        if code >= 500:
            logger.error("Internal failure on %s: %s", request.url.path, exc)
            detail = InternalFailureError().args[0]
        else:
            logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc)
            detail = str(exc)
        return JSONResponse(status_code=code, content={"detail": detail})

    @app.exception_handler(JWTError)
    async def jwt_error_handler(request: Request, exc: JWTError):
        logger.info("Rejected token on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Invalid authentication token"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _describe(exc.errors())},
        )

    @app.exception_handler(pydantic.ValidationError)
    async def model_validation_error_handler(
        request: Request, exc: pydantic.ValidationError
    ):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _describe(exc.errors())},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        # Raw parser messages (e.g. from UUID()) stay in the log
        logger.warning("Bad value on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": INVALID_VALUE_DETAIL},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def _describe(errors) -> str:
    """Flatten pydantic error entries into one message."""
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"
