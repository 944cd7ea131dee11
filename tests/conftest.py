"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from murmur.domain.model import Comment, User
from murmur.domain.value import CommentId, Like, PostId, UserId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(name: str = "Test User", user_id: UserId | None = None) -> User:
    """Helper function to build a user entity for tests."""
    return User(
        id=user_id or UserId(uuid4()),
        name=name,
        email=None,
        created_at=datetime.now(timezone.utc),
    )


def make_comment(
    user_id: UserId,
    text: str = "Test comment",
    post_id: PostId | None = None,
    likes: list[UserId] | None = None,
    date: datetime | None = None,
) -> Comment:
    """Helper function to build a comment entity for tests.

    Args:
        user_id: Author of the comment
        text: Comment text
        post_id: Post the comment belongs to (random if omitted)
        likes: User IDs that liked the comment, newest first
        date: Creation date (now if omitted)

    Returns:
        Comment entity (not saved)
    """
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id or PostId(uuid4()),
        user_id=user_id,
        text=text,
        likes=[Like(user=uid) for uid in likes or []],
        date=date or datetime.now(timezone.utc),
    )
