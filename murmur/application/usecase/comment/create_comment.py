"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from murmur.domain.error import InvalidCredentialError, NotFoundError
from murmur.domain.service import CommentService, UserService
from murmur.domain.value import PostId

from .common import CommentItem, parse_user_id, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: UUID
    text: str
    user_id: str  # Caller, from the verified token


class CreateCommentUseCase:
    """Use case for commenting on a post as the calling user."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service, resolves the caller
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Create the comment.

        A verified token only proves the caller once existed, so the user
        record is looked up before anything is written. The post is taken
        on trust: posts belong to another service.

        Args:
            request: Create comment request

        Returns:
            The created comment, with no likes

        Raises:
            InvalidCredentialError: If the caller is not an existing user
        """
        user_id = parse_user_id(request.user_id)

        try:
            user = await self.user_service.get_by_id(user_id)
        except NotFoundError:
            raise InvalidCredentialError(f"unknown user {request.user_id}")

        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            user_id=user.id,
            text=request.text,
        )
        return to_comment_item(comment)
