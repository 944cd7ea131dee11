"""Domain services: the business rules, above the repositories."""

from .comment_service import CommentService
from .jwt_service import JWTService
from .user_service import UserService

__all__ = ["CommentService", "JWTService", "UserService"]
