"""In-memory persistence for tests."""

from dishka import Scope, provide

from murmur.domain.repository import CommentRepository, UserRepository
from murmur.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from murmur.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Dict-backed repositories.

    APP scope keeps data across the requests an E2E test makes; each test
    builds its own container, so nothing leaks between tests.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def user_repository(self) -> UserRepository:
        return InMemoryUserRepository()

    @provide
    def comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()
