"""Sign up use case."""

from pydantic import BaseModel

from ideabox.application.usecase.common import UserInfo
from ideabox.domain.service import AuthService, JWTService
from ideabox.domain.value import EmailAddress, Password, Username


class SignUpRequest(BaseModel):
    """Sign up request."""

    username: Username
    email: EmailAddress
    password: Password


class SignUpResponse(BaseModel):
    """Sign up response.

    The token is set as a cookie by the route, not returned in the body.
    """

    user: UserInfo
    token: str


class SignUpUseCase:
    """Use case for creating an account with a password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize sign up use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign up flow.

        Steps:
        1. Create the user (unique username and e-mail)
        2. Issue a verification token and send the e-mail
        3. Publish UserSignedUp
        4. Create the session JWT

        Raises:
            ConflictError: If username or e-mail is taken
            InternalFailureError: If the verification e-mail could not be sent
        """
        user = await self.auth_service.sign_up(
            request.username, request.email, request.password
        )
        token = self.jwt_service.create_token(str(user.id), user.username)
        return SignUpResponse(user=UserInfo.from_user(user), token=token)
