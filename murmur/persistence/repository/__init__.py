"""Repositories backed by PostgreSQL."""

from murmur.persistence.repository.comment import PostgresCommentRepository
from murmur.persistence.repository.user import PostgresUserRepository

__all__ = ["PostgresCommentRepository", "PostgresUserRepository"]
