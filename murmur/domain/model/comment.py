"""Comment entity.

Comments are flat (no threading) and carry the likes they have received.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from murmur.domain.model.common import DomainModel
from murmur.domain.value import CommentId, Like, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Business rules:
    - user_id is the author and never changes after creation
    - Only the author may edit or delete the comment
    - Each user appears at most once in likes (newest like first)
    """

    id: CommentId
    post_id: PostId
    user_id: UserId
    text: str
    likes: list[Like] = Field(default_factory=list)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("likes")
    @classmethod
    def validate_unique_likes(cls, v: list[Like]) -> list[Like]:
        """Reject like lists that contain the same user twice."""
        users = [like.user for like in v]
        if len(users) != len(set(users)):
            raise ValueError("A user can like a comment only once")
        return v

    def with_likes(self, likes: list[Like]) -> "Comment":
        """Copy of this comment with ``likes`` replaced, validated again."""
        return Comment.model_validate({**self.model_dump(), "likes": likes})

    def is_owned_by(self, user_id: UserId) -> bool:
        """Check whether the given user authored this comment."""
        return self.user_id == user_id

    def is_liked_by(self, user_id: UserId) -> bool:
        """Check whether the given user has liked this comment."""
        return any(like.user == user_id for like in self.likes)
