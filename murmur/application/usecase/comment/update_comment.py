"""Update comment use case."""

from pydantic import BaseModel

from murmur.domain.service import CommentService

from .common import CommentItem, parse_comment_id, parse_user_id, to_comment_item


class UpdateCommentRequest(BaseModel):
    comment_id: str
    user_id: str  # Caller; must be the author
    text: str  # May be empty


class UpdateCommentUseCase:
    """Replace a comment's text. Date and likes are left alone."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """
        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        updated = await self.comment_service.update_text(
            comment_id=parse_comment_id(request.comment_id),
            user_id=parse_user_id(request.user_id),
            text=request.text,
        )
        return to_comment_item(updated)
