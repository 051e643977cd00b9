"""Start OAuth sign-in use case."""

import secrets

from pydantic import BaseModel

from ideabox.domain.service import AuthService
from ideabox.domain.value import AuthProvider


class StartOAuthRequest(BaseModel):
    """Start OAuth sign-in request."""

    provider: AuthProvider


class StartOAuthResponse(BaseModel):
    """Where to send the browser, and the state to check on callback."""

    authorization_url: str
    state: str


class StartOAuthUseCase:
    """Use case for redirecting to an OAuth provider."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: StartOAuthRequest) -> StartOAuthResponse:
        """Generate a state value and the provider's authorization URL.

        Raises:
            NotFoundError: If the provider is not configured
        """
        state = secrets.token_urlsafe(32)
        url = self.auth_service.start_oauth(request.provider, state)
        return StartOAuthResponse(authorization_url=url, state=state)
