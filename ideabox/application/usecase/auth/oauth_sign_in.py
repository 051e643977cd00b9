"""OAuth sign-in callback use case."""

from pydantic import BaseModel

from ideabox.application.usecase.common import UserInfo
from ideabox.domain.service import AuthService, JWTService
from ideabox.domain.value import AuthProvider


class OAuthSignInRequest(BaseModel):
    """Parameters of the provider's callback.

    The state has been checked against the state cookie by the route.
    """

    provider: AuthProvider
    code: str


class OAuthSignInResponse(BaseModel):
    """OAuth sign-in response."""

    user: UserInfo
    token: str


class OAuthSignInUseCase:
    """Use case for finishing an OAuth sign-in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize OAuth sign-in use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: OAuthSignInRequest) -> OAuthSignInResponse:
        """Execute OAuth sign-in.

        Steps:
        1. Exchange the code for the provider profile
        2. Find the user by provider id, else link by e-mail, else create
        3. New users get a verification e-mail and a Signed Up event
        4. Create the session JWT

        Raises:
            NotAuthorizedError: If the provider rejected the code
            ValidationError: If a new account is needed but there is no e-mail
        """
        user = await self.auth_service.sign_in_with_oauth(request.provider, request.code)
        token = self.jwt_service.create_token(str(user.id), user.username)
        return OAuthSignInResponse(user=UserInfo.from_user(user), token=token)
