"""Domain service providers.

Services are request-scoped because the repositories they wrap share the
request's database session.
"""

from dishka import Scope, provide

from murmur.config import AuthSettings
from murmur.domain.repository import CommentRepository, UserRepository
from murmur.domain.service import CommentService, JWTService, UserService
from murmur.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    scope = Scope.REQUEST

    @provide
    def jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def comment_service(self, comment_repository: CommentRepository) -> CommentService:
        return CommentService(comment_repository=comment_repository)

    @provide
    def user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)
