"""Authentication use cases."""

from .forgot_password import ForgotPasswordRequest, ForgotPasswordUseCase
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .oauth_sign_in import OAuthSignInRequest, OAuthSignInResponse, OAuthSignInUseCase
from .resend_verify_email import ResendVerifyEmailRequest, ResendVerifyEmailUseCase
from .reset_password import ResetPasswordRequest, ResetPasswordUseCase
from .sign_in import SignInRequest, SignInResponse, SignInUseCase
from .sign_up import SignUpRequest, SignUpResponse, SignUpUseCase
from .start_oauth import StartOAuthRequest, StartOAuthResponse, StartOAuthUseCase
from .verify_email import VerifyEmailRequest, VerifyEmailResponse, VerifyEmailUseCase

__all__ = [
    "ForgotPasswordRequest",
    "ForgotPasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "OAuthSignInRequest",
    "OAuthSignInResponse",
    "OAuthSignInUseCase",
    "ResendVerifyEmailRequest",
    "ResendVerifyEmailUseCase",
    "ResetPasswordRequest",
    "ResetPasswordUseCase",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
    "StartOAuthRequest",
    "StartOAuthResponse",
    "StartOAuthUseCase",
    "VerifyEmailRequest",
    "VerifyEmailResponse",
    "VerifyEmailUseCase",
]
