"""Delete comment use case."""

from pydantic import BaseModel

from murmur.domain.service import CommentService

from .common import parse_comment_id, parse_user_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    msg: str


class DeleteCommentUseCase:
    """Use case for permanently deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
        """
        await self.comment_service.delete_comment(
            comment_id=parse_comment_id(request.comment_id),
            user_id=parse_user_id(request.user_id),
        )
        return DeleteCommentResponse(msg="Comment removed")
