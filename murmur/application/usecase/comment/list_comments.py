"""List comments use case."""

from murmur.domain.service import CommentService

from .common import CommentItem, to_comment_item


class ListCommentsUseCase:
    """Use case for listing every comment, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self) -> list[CommentItem]:
        """Execute list comments flow.

        Returns:
            All comments ordered by date descending
        """
        comments = await self.comment_service.list_comments()
        return [to_comment_item(comment) for comment in comments]
