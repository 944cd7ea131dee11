"""Entities."""

from murmur.domain.model.comment import Comment
from murmur.domain.model.user import User

__all__ = ["Comment", "User"]
