"""Row <-> entity mapping.

Entities are frozen pydantic models, so tables are mapped by hand rather
than through the ORM.
"""

from collections.abc import Mapping
from typing import Any, Dict
from uuid import UUID

from murmur.domain.model import Comment, User
from murmur.domain.value import CommentId, Like, PostId, UserId


def _uuid(value: Any) -> UUID:
    # JSONB payloads hold IDs as strings; UUID columns already yield UUIDs
    return value if isinstance(value, UUID) else UUID(value)


def row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row.get("email"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump()


def row_to_comment(row: Mapping[str, Any]) -> Comment:
    """Build a Comment from a ``comments`` row.

    ``likes`` arrives as decoded JSONB: a list of ``{"user": "<uuid>"}``.
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        text=row["text"],
        likes=[Like(user=UserId(_uuid(like["user"]))) for like in row["likes"]],
        date=row["date"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Column values for a comment, with likes serialized for JSONB."""
    values = comment.model_dump(exclude={"likes"})
    values["likes"] = [{"user": str(like.user)} for like in comment.likes]
    return values
