"""Response items shared by the comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from murmur.domain.error import InvalidCredentialError, NotFoundError
from murmur.domain.model import Comment
from murmur.domain.value import CommentId, Like, UserId


class LikeItem(BaseModel):
    """Like item in response."""

    user: str


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    text: str
    post: str
    user: str
    likes: list[LikeItem]
    date: datetime


def to_like_items(likes: list[Like]) -> list[LikeItem]:
    """Convert likes to response items, preserving order."""
    return [LikeItem(user=str(like.user)) for like in likes]


def to_comment_item(comment: Comment) -> CommentItem:
    """Convert a comment entity to its response item."""
    return CommentItem(
        id=str(comment.id),
        text=comment.text,
        post=str(comment.post_id),
        user=str(comment.user_id),
        likes=to_like_items(comment.likes),
        date=comment.date,
    )


def parse_comment_id(comment_id: str) -> CommentId:
    """Parse a comment ID; a malformed ID cannot name an existing comment.

    Raises:
        NotFoundError: If the ID is not a valid UUID
    """
    try:
        return CommentId(UUID(comment_id))
    except ValueError:
        raise NotFoundError("Comment", comment_id)


def parse_user_id(user_id: str) -> UserId:
    """Parse the caller's user ID.

    Raises:
        InvalidCredentialError: If the ID is not a valid UUID
    """
    try:
        return UserId(UUID(user_id))
    except ValueError:
        raise InvalidCredentialError(f"malformed user id {user_id!r}")
