"""Like and unlike comment use cases."""

from pydantic import BaseModel

from murmur.domain.service import CommentService

from .common import LikeItem, parse_comment_id, parse_user_id, to_like_items


class LikeCommentRequest(BaseModel):
    """Like or unlike comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeCommentUseCase:
    """Use case for liking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize like comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> list[LikeItem]:
        """Execute like flow.

        Returns:
            The comment's likes, newest first

        Raises:
            NotFoundError: If comment not found
            AlreadyLikedError: If the user already liked the comment
        """
        likes = await self.comment_service.like(
            comment_id=parse_comment_id(request.comment_id),
            user_id=parse_user_id(request.user_id),
        )
        return to_like_items(likes)


class UnlikeCommentUseCase:
    """Use case for removing a like from a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize unlike comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> list[LikeItem]:
        """Execute unlike flow.

        Returns:
            The remaining likes, newest first

        Raises:
            NotFoundError: If comment not found
            NotLikedError: If the user has not liked the comment
        """
        likes = await self.comment_service.unlike(
            comment_id=parse_comment_id(request.comment_id),
            user_id=parse_user_id(request.user_id),
        )
        return to_like_items(likes)
