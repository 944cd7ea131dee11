"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from murmur.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from murmur.domain.model.comment import Comment
from murmur.domain.repository import CommentRepository
from murmur.domain.value import CommentId, Like, PostId, UserId


class CommentService:
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, user_id: UserId, text: str
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post ID (not checked against any post collection)
            user_id: Author user ID
            text: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                text=text,
                likes=[],
                date=datetime.now(timezone.utc),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                user_id=str(user_id),
            )
            return saved

    async def list_comments(self) -> list[Comment]:
        """Get all comments, newest first."""
        with logfire.span("comment_service.list_comments"):
            comments = await self.comment_repository.find_all()
            logfire.info("Comments retrieved", count=len(comments))
            return comments

    async def get_comment(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID
            for_update: Lock the comment for the rest of the transaction

        Returns:
            The comment

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(
                comment_id, for_update=for_update
            )
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_text(
        self, comment_id: CommentId, user_id: UserId, text: str
    ) -> Comment:
        """Replace the text of a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: Caller user ID (must be the author)
            text: New text content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_text",
            comment_id=str(comment_id),
            user_id=str(user_id),
            text_length=len(text),
        ):
            comment = await self.get_comment(comment_id, for_update=True)
            self._ensure_owner(comment, user_id)

            updated = await self.comment_repository.save(
                comment.model_copy(update={"text": text})
            )
            logfire.info("Comment text updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Permanently delete a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: Caller user ID (must be the author)

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id, for_update=True)
            self._ensure_owner(comment, user_id)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def like(self, comment_id: CommentId, user_id: UserId) -> list[Like]:
        """Add the user's like to the front of a comment's likes.

        Args:
            comment_id: Comment ID
            user_id: Liking user ID

        Returns:
            The comment's likes after the change, newest first

        Raises:
            NotFoundError: If comment not found
            AlreadyLikedError: If the user already liked the comment
        """
        with logfire.span(
            "comment_service.like", comment_id=str(comment_id), user_id=str(user_id)
        ):
            comment = await self.get_comment(comment_id, for_update=True)
            if comment.is_liked_by(user_id):
                logfire.warn(
                    "Duplicate like attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise AlreadyLikedError(str(comment_id), str(user_id))

            likes = [Like(user=user_id), *comment.likes]
            saved = await self.comment_repository.save(
                comment.with_likes(likes)
            )
            logfire.info(
                "Comment liked", comment_id=str(comment_id), likes=len(saved.likes)
            )
            return saved.likes

    async def unlike(self, comment_id: CommentId, user_id: UserId) -> list[Like]:
        """Remove the user's like from a comment.

        Args:
            comment_id: Comment ID
            user_id: Unliking user ID

        Returns:
            The remaining likes, newest first

        Raises:
            NotFoundError: If comment not found
            NotLikedError: If the user has not liked the comment
        """
        with logfire.span(
            "comment_service.unlike", comment_id=str(comment_id), user_id=str(user_id)
        ):
            comment = await self.get_comment(comment_id, for_update=True)
            if not comment.is_liked_by(user_id):
                logfire.warn(
                    "Unlike without like",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotLikedError(str(comment_id), str(user_id))

            likes = [like for like in comment.likes if like.user != user_id]
            saved = await self.comment_repository.save(
                comment.with_likes(likes)
            )
            logfire.info(
                "Comment unliked", comment_id=str(comment_id), likes=len(saved.likes)
            )
            return saved.likes

    def _ensure_owner(self, comment: Comment, user_id: UserId) -> None:
        """Raise NotAuthorizedError unless the user authored the comment."""
        if not comment.is_owned_by(user_id):
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment.id),
                owner_id=str(comment.user_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("comment", str(comment.id), str(user_id))
