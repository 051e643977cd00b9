"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from ideabox.application.usecase.auth import (
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    OAuthSignInUseCase,
    ResendVerifyEmailUseCase,
    ResetPasswordUseCase,
    SignInUseCase,
    SignUpUseCase,
    StartOAuthUseCase,
    VerifyEmailUseCase,
)
from ideabox.application.usecase.auth.forgot_password import ForgotPasswordRequest
from ideabox.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from ideabox.application.usecase.auth.oauth_sign_in import OAuthSignInRequest
from ideabox.application.usecase.auth.resend_verify_email import (
    ResendVerifyEmailRequest,
)
from ideabox.application.usecase.auth.reset_password import ResetPasswordRequest
from ideabox.application.usecase.auth.sign_in import SignInRequest
from ideabox.application.usecase.auth.sign_up import SignUpRequest
from ideabox.application.usecase.auth.start_oauth import StartOAuthRequest
from ideabox.application.usecase.auth.verify_email import (
    VerifyEmailRequest,
    VerifyEmailResponse,
)
from ideabox.application.usecase.common import UserInfo
from ideabox.config import Settings
from ideabox.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from ideabox.domain.value import AuthProvider
from ideabox.util.jwt import JWTError

from .common import clear_auth_cookie, set_auth_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class SignUpAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str
    email: str
    password: str


class SignInAPIRequest(BaseModel):
    """API request for signing in."""

    username: str
    password: str


class VerifyEmailAPIRequest(BaseModel):
    """API request carrying an e-mail token code."""

    code: str


class ResendVerifyEmailAPIRequest(BaseModel):
    """API request for a new verification e-mail."""

    email: str


class ForgotPasswordAPIRequest(BaseModel):
    """API request for a password reset e-mail."""

    username: str | None = None
    email: str | None = None


class ResetPasswordAPIRequest(BaseModel):
    """API request for setting a new password with a reset code."""

    code: str
    new_password: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post("/signup", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpAPIRequest,
    response: Response,
    sign_up_use_case: FromDishka[SignUpUseCase],
    settings: FromDishka[Settings],
) -> UserInfo:
    """Create an account and sign in.

    A verification e-mail is sent to the given address.

    Example:
        POST /auth/signup
        {"username": "alice", "email": "alice@example.com", "password": "S3cure!pw"}

        Response (201, sets auth_token cookie):
        {"user_id": "...", "username": "alice", "has_verified_email": false, ...}
    """
    result = await sign_up_use_case.execute(
        SignUpRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )
    logger.info(f"User signed up: {result.user.username}")
    set_auth_cookie(response, result.token, settings)
    return result.user


@router.post("/signin", response_model=UserInfo)
async def sign_in(
    request: SignInAPIRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> UserInfo:
    """Sign in with username and password; sets the auth cookie."""
    result = await sign_in_use_case.execute(
        SignInRequest(username=request.username, password=request.password)
    )
    set_auth_cookie(response, result.token, settings)
    return result.user


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> MessageResponse:
    """Logout user by clearing authentication cookie."""
    clear_auth_cookie(response, settings)
    return MessageResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except (JWTError, NotFoundError) as e:
        logger.info(f"Stale auth cookie: {e}")
        return AuthStatusResponse(authenticated=False)


@router.post("/verify-email", response_model=VerifyEmailResponse)
async def verify_email(
    request: VerifyEmailAPIRequest,
    verify_email_use_case: FromDishka[VerifyEmailUseCase],
) -> VerifyEmailResponse:
    """Redeem a verification code.

    Returns 404 for unknown or already used codes and 410 for expired ones.
    """
    return await verify_email_use_case.execute(VerifyEmailRequest(code=request.code))


@router.post("/verify-email/resend", response_model=MessageResponse)
async def resend_verify_email(
    request: ResendVerifyEmailAPIRequest,
    resend_use_case: FromDishka[ResendVerifyEmailUseCase],
) -> MessageResponse:
    """Send a new verification e-mail.

    Always succeeds, whether or not the address is registered.
    """
    await resend_use_case.execute(ResendVerifyEmailRequest(email=request.email))
    return MessageResponse(
        success=True, message="If the address is registered, an e-mail was sent"
    )


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordAPIRequest,
    forgot_password_use_case: FromDishka[ForgotPasswordUseCase],
) -> MessageResponse:
    """Send a password reset e-mail to a user found by username or e-mail."""
    await forgot_password_use_case.execute(
        ForgotPasswordRequest(username=request.username, email=request.email)
    )
    return MessageResponse(
        success=True, message="If the account exists, an e-mail was sent"
    )


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordAPIRequest,
    reset_password_use_case: FromDishka[ResetPasswordUseCase],
) -> MessageResponse:
    """Set a new password with a reset code."""
    await reset_password_use_case.execute(
        ResetPasswordRequest(code=request.code, new_password=request.new_password)
    )
    return MessageResponse(success=True, message="Password updated")


# Registered last so that /auth/me and friends match first
OAUTH_STATE_COOKIE = "oauth_state"

# Reason codes passed to the frontend error page
OAUTH_ERROR_REASONS: dict[type[DomainError], str] = {
    NotAuthorizedError: "access_denied",
    ValidationError: "email_required",
    NotFoundError: "unknown_provider",
    ConflictError: "conflict",
}


def _oauth_redirect(url: str) -> RedirectResponse:
    redirect = RedirectResponse(url=url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    redirect.delete_cookie(key=OAUTH_STATE_COOKIE, path="/auth")
    return redirect


def _oauth_error_redirect(settings: Settings, reason: str) -> RedirectResponse:
    error_page = settings.frontend_url(settings.frontend.oauth_error_route)
    return _oauth_redirect(f"{error_page}?{urlencode({'error': reason})}")


@router.get("/{provider}")
async def start_oauth(
    provider: AuthProvider,
    start_oauth_use_case: FromDishka[StartOAuthUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Send the browser to the provider's consent page.

    The state value travels in a short-lived cookie and must come back
    unchanged on the callback.

    Example:
        GET /auth/github  ->  307 to https://github.com/login/oauth/authorize?...
    """
    result = await start_oauth_use_case.execute(StartOAuthRequest(provider=provider))
    redirect = RedirectResponse(
        url=result.authorization_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT
    )
    redirect.set_cookie(
        key=OAUTH_STATE_COOKIE,
        value=result.state,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/auth",
        max_age=settings.oauth.state_max_age_seconds,
    )
    return redirect


@router.get("/{provider}/callback")
async def oauth_callback(
    provider: AuthProvider,
    oauth_sign_in_use_case: FromDishka[OAuthSignInUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    oauth_state: str | None = Cookie(default=None),
) -> RedirectResponse:
    """Finish an OAuth sign-in and redirect to the frontend.

    On success the auth cookie is set and the browser lands on the success
    route. Failures land on the error route with an ``error`` reason.
    """
    if error or not code:
        logger.info(f"OAuth consent not given: provider={provider.value}, error={error}")
        return _oauth_error_redirect(settings, "access_denied")

    if not state or not oauth_state or not secrets.compare_digest(state, oauth_state):
        logger.warning(f"OAuth state mismatch: provider={provider.value}")
        return _oauth_error_redirect(settings, "invalid_state")

    try:
        result = await oauth_sign_in_use_case.execute(
            OAuthSignInRequest(provider=provider, code=code)
        )
    except DomainError as e:
        reason = next(
            (r for cls, r in OAUTH_ERROR_REASONS.items() if isinstance(e, cls)),
            "unexpected",
        )
        logger.info(f"OAuth sign-in failed: provider={provider.value}, reason={reason}")
        return _oauth_error_redirect(settings, reason)

    logger.info(f"OAuth sign-in: user={result.user.username}, provider={provider.value}")
    redirect = _oauth_redirect(settings.frontend_url(settings.frontend.oauth_success_route))
    set_auth_cookie(redirect, result.token, settings)
    return redirect
