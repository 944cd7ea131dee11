"""Repository interfaces; implementations live in murmur.persistence."""

from murmur.domain.repository.comment import CommentRepository
from murmur.domain.repository.user import UserRepository

__all__ = ["CommentRepository", "UserRepository"]
