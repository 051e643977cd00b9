"""Application layer DI providers."""

from dishka import Scope, provide

from ideabox.application.usecase.admin import ListRecordsUseCase
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
from ideabox.application.usecase.domain import (
    CreateDomainUseCase,
    DeleteDomainUseCase,
    GetDomainByNameUseCase,
    GetDomainUseCase,
    ListUserDomainsUseCase,
    UpdateDomainUseCase,
)
from ideabox.application.usecase.idea import (
    CreateIdeaUseCase,
    DeleteIdeaUseCase,
    GetIdeaUseCase,
    RankIdeasUseCase,
    UpdateIdeaUseCase,
)
from ideabox.application.usecase.user import DeleteMeUseCase, UpdateMeUseCase
from ideabox.application.usecase.vote import (
    DeleteVoteUseCase,
    GetVoteUseCase,
    ListVotesUseCase,
    SubmitVoteUseCase,
    UpdateVoteUseCase,
)
from ideabox.domain.service import (
    AuthService,
    DomainService,
    IdeaService,
    JWTService,
    UserService,
    VoteService,
)
from ideabox.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_up_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> SignUpUseCase:
        """Provide sign up use case."""
        return SignUpUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> SignInUseCase:
        """Provide sign in use case."""
        return SignInUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_start_oauth_use_case(self, auth_service: AuthService) -> StartOAuthUseCase:
        """Provide start OAuth sign-in use case."""
        return StartOAuthUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_oauth_sign_in_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> OAuthSignInUseCase:
        """Provide OAuth sign-in callback use case."""
        return OAuthSignInUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_email_use_case(self, auth_service: AuthService) -> VerifyEmailUseCase:
        """Provide verify e-mail use case."""
        return VerifyEmailUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_resend_verify_email_use_case(
        self, auth_service: AuthService
    ) -> ResendVerifyEmailUseCase:
        """Provide resend verification e-mail use case."""
        return ResendVerifyEmailUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_forgot_password_use_case(
        self, auth_service: AuthService
    ) -> ForgotPasswordUseCase:
        """Provide forgot password use case."""
        return ForgotPasswordUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_password_use_case(
        self, auth_service: AuthService
    ) -> ResetPasswordUseCase:
        """Provide reset password use case."""
        return ResetPasswordUseCase(auth_service=auth_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_update_me_use_case(self, user_service: UserService) -> UpdateMeUseCase:
        """Provide update own account use case."""
        return UpdateMeUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_me_use_case(self, user_service: UserService) -> DeleteMeUseCase:
        """Provide delete own account use case."""
        return DeleteMeUseCase(user_service=user_service)

    # Domain use cases
    @provide(scope=Scope.REQUEST)
    def get_create_domain_use_case(
        self, domain_service: DomainService, user_service: UserService
    ) -> CreateDomainUseCase:
        """Provide create domain use case."""
        return CreateDomainUseCase(
            domain_service=domain_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_domain_use_case(self, domain_service: DomainService) -> GetDomainUseCase:
        """Provide get domain use case."""
        return GetDomainUseCase(domain_service=domain_service)

    @provide(scope=Scope.REQUEST)
    def get_get_domain_by_name_use_case(
        self, domain_service: DomainService
    ) -> GetDomainByNameUseCase:
        """Provide get domain by name use case."""
        return GetDomainByNameUseCase(domain_service=domain_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_domains_use_case(
        self, domain_service: DomainService
    ) -> ListUserDomainsUseCase:
        """Provide list user domains use case."""
        return ListUserDomainsUseCase(domain_service=domain_service)

    @provide(scope=Scope.REQUEST)
    def get_update_domain_use_case(
        self, domain_service: DomainService, user_service: UserService
    ) -> UpdateDomainUseCase:
        """Provide update domain use case."""
        return UpdateDomainUseCase(
            domain_service=domain_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_domain_use_case(
        self, domain_service: DomainService, user_service: UserService
    ) -> DeleteDomainUseCase:
        """Provide delete domain use case."""
        return DeleteDomainUseCase(
            domain_service=domain_service, user_service=user_service
        )

    # Idea use cases
    @provide(scope=Scope.REQUEST)
    def get_create_idea_use_case(
        self, idea_service: IdeaService, user_service: UserService
    ) -> CreateIdeaUseCase:
        """Provide create idea use case."""
        return CreateIdeaUseCase(idea_service=idea_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_idea_use_case(self, idea_service: IdeaService) -> GetIdeaUseCase:
        """Provide get idea use case."""
        return GetIdeaUseCase(idea_service=idea_service)

    @provide(scope=Scope.REQUEST)
    def get_update_idea_use_case(
        self, idea_service: IdeaService, user_service: UserService
    ) -> UpdateIdeaUseCase:
        """Provide update idea use case."""
        return UpdateIdeaUseCase(idea_service=idea_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_idea_use_case(
        self, idea_service: IdeaService, user_service: UserService
    ) -> DeleteIdeaUseCase:
        """Provide delete idea use case."""
        return DeleteIdeaUseCase(idea_service=idea_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_rank_ideas_use_case(self, idea_service: IdeaService) -> RankIdeasUseCase:
        """Provide rank ideas use case."""
        return RankIdeasUseCase(idea_service=idea_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(self, vote_service: VoteService) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_update_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> UpdateVoteUseCase:
        """Provide update vote use case."""
        return UpdateVoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> DeleteVoteUseCase:
        """Provide delete vote use case."""
        return DeleteVoteUseCase(vote_service=vote_service, user_service=user_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_records_use_case(
        self,
        user_service: UserService,
        domain_service: DomainService,
        idea_service: IdeaService,
        vote_service: VoteService,
    ) -> ListRecordsUseCase:
        """Provide admin listing use case."""
        return ListRecordsUseCase(
            user_service=user_service,
            domain_service=domain_service,
            idea_service=idea_service,
            vote_service=vote_service,
        )
