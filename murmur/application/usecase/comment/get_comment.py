"""Get comment use case."""

from pydantic import BaseModel

from murmur.domain.service import CommentService

from .common import CommentItem, parse_comment_id, to_comment_item


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase:
    """Use case for getting a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_service.get_comment(
            parse_comment_id(request.comment_id)
        )
        return to_comment_item(comment)
