"""Helpers shared by the route modules."""

from fastapi import HTTPException, Response, status

from ideabox.application.usecase.auth import GetCurrentUserUseCase
from ideabox.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from ideabox.config import Settings
from ideabox.domain.error import NotFoundError
from ideabox.util.jwt import JWTError

AUTH_COOKIE = "auth_token"


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
) -> GetCurrentUserResponse:
    """Resolve the cookie to the signed-in user.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid, or names a
            user that no longer exists
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the JWT as an HTTP-only cookie.

    Production serves the API and frontend from sibling subdomains, so the
    cookie is cross-site there (samesite=none, secure).
    """
    is_production = settings.is_production
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain if is_production else None,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response, settings: Settings) -> None:
    """Delete the auth cookie with the domain and path it was set with."""
    response.delete_cookie(
        key=AUTH_COOKIE,
        domain=settings.auth.cookie_domain if settings.is_production else None,
        path="/",
    )
