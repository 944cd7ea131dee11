"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from murmur.domain.model.comment import Comment
from murmur.domain.value import CommentId


class CommentRepository(ABC):
    """Storage for comments.

    Implementations: ``PostgresCommentRepository`` in production and
    ``InMemoryCommentRepository`` in tests.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: Comment ID
            for_update: Hold a row lock until the transaction ends, so two
                read-modify-write sequences on one comment cannot interleave

        Returns:
            The comment, or None if there is none with that ID
        """

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Every comment, ordered by date descending."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment or overwrite its text and likes."""

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Remove a comment for good. Unknown IDs are ignored."""
