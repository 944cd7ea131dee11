"""Dict-backed CommentRepository for tests."""

from typing import Optional

from murmur.domain.model.comment import Comment
from murmur.domain.repository.comment import CommentRepository
from murmur.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """Keeps comments in a dict keyed by ID.

    Requests run one at a time on the event loop between awaits, so
    ``for_update`` needs no lock here.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_all(self) -> list[Comment]:
        return sorted(self._comments.values(), key=lambda c: c.date, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        self._comments.pop(comment_id, None)
