"""Value objects and identifiers."""

from murmur.domain.value.identifiers import CommentId, PostId, UserId
from murmur.domain.value.types import Like

__all__ = ["CommentId", "Like", "PostId", "UserId"]
