"""Comment routes.

Mounted under ``settings.api.mount_path`` (``/api/comments`` by default).
Every route requires a JWT in the ``x-auth-token`` header or the
``auth_token`` cookie.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, Field

from murmur.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    LikeItem,
    ListCommentsUseCase,
    UnlikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from murmur.domain.error import (
    AlreadyLikedError,
    MissingCredentialError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from murmur.domain.service import JWTService

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

COMMENT_NOT_FOUND = "Comment not found"
NOT_AUTHORIZED = "User not authorized"
SERVER_ERROR = "Server error"
INVALID_TOKEN = "Token is not valid"


def _authenticate(
    jwt_service: JWTService, header_token: str | None, cookie_token: str | None
) -> str:
    """Resolve the caller's user ID, preferring the header over the cookie.

    Raises:
        HTTPException: 401 if the credential is missing or invalid
    """
    try:
        return str(jwt_service.authenticate(header_token, cookie_token))
    except MissingCredentialError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )
    except NotAuthenticatedError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_TOKEN,
        )


def _server_error(action: str, error: Exception) -> HTTPException:
    logfire.error(
        f"Unexpected error while trying to {action}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR,
    )


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1)
    post: UUID


@router.post("", response_model=CommentItem)
@router.post("/", response_model=CommentItem, include_in_schema=False)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a comment on a post.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        x_auth_token: JWT token from header
        auth_token: JWT token from cookie

    Returns:
        Created comment
    """
    user_id = _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        use_case_request = CreateCommentRequest(
            post_id=request.post,
            text=request.text,
            user_id=user_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotAuthenticatedError as e:
        logfire.warn("Comment creation by unknown user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_TOKEN,
        )
    except Exception as e:
        raise _server_error("create comment", e)


@router.get("", response_model=list[CommentItem])
@router.get("/", response_model=list[CommentItem], include_in_schema=False)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> list[CommentItem]:
    """Get all comments, newest first."""
    _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        return await list_comments_use_case.execute()
    except Exception as e:
        raise _server_error("list comments", e)


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Get a comment by ID."""
    _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=COMMENT_NOT_FOUND
        )
    except Exception as e:
        raise _server_error("get comment", e)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    text: str


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Update a comment's text content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Update data (text content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        x_auth_token: JWT token from header
        auth_token: JWT token from cookie

    Returns:
        Updated comment
    """
    user_id = _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            user_id=user_id,
            text=request.text,
        )
        return await update_comment_use_case.execute(use_case_request)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=COMMENT_NOT_FOUND
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHORIZED
        )
    except Exception as e:
        raise _server_error("update comment", e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment permanently.

    Only the comment author can delete.
    """
    user_id = _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=COMMENT_NOT_FOUND
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHORIZED
        )
    except Exception as e:
        raise _server_error("delete comment", e)


@router.put("/like/{comment_id}", response_model=list[LikeItem])
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> list[LikeItem]:
    """Like a comment.

    Returns:
        The comment's likes, newest first
    """
    user_id = _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        return await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=COMMENT_NOT_FOUND
        )
    except AlreadyLikedError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Comment already liked"
        )
    except Exception as e:
        raise _server_error("like comment", e)


@router.put("/unlike/{comment_id}", response_model=list[LikeItem])
async def unlike_comment(
    comment_id: str,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    x_auth_token: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> list[LikeItem]:
    """Remove the caller's like from a comment.

    Returns:
        The remaining likes, newest first
    """
    user_id = _authenticate(jwt_service, x_auth_token, auth_token)

    try:
        return await unlike_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=COMMENT_NOT_FOUND
        )
    except NotLikedError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment has not yet been liked",
        )
    except Exception as e:
        raise _server_error("unlike comment", e)
