"""Repositories without a database, used by the test container."""

from .comment import InMemoryCommentRepository
from .user import InMemoryUserRepository

__all__ = ["InMemoryCommentRepository", "InMemoryUserRepository"]
