"""Sign in use case."""

from pydantic import BaseModel

from ideabox.application.usecase.common import UserInfo
from ideabox.domain.service import AuthService, JWTService


class SignInRequest(BaseModel):
    """Sign in request."""

    username: str
    password: str


class SignInResponse(BaseModel):
    """Sign in response."""

    user: UserInfo
    token: str


class SignInUseCase:
    """Use case for password sign in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Check credentials and create the session JWT.

        Raises:
            NotAuthorizedError: If the credentials are wrong
        """
        user = await self.auth_service.sign_in(request.username, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username)
        return SignInResponse(user=UserInfo.from_user(user), token=token)
