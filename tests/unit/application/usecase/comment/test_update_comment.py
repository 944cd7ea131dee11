"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from murmur.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from murmur.domain.error import NotAuthorizedError, NotFoundError
from murmur.domain.repository import CommentRepository
from murmur.domain.value import UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_text_success(self, unit_env):
        """Updating comment text by author should succeed."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = await comment_repo.save(make_comment(author_id, text="Original"))

        request = UpdateCommentRequest(
            comment_id=str(comment.id),
            user_id=str(author_id),
            text="Edited",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.id == str(comment.id)
        assert response.text == "Edited"
        assert response.date == comment.date

    @pytest.mark.asyncio
    async def test_update_comment_by_other_user_fails(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(UserId(uuid4())))

        request = UpdateCommentRequest(
            comment_id=str(comment.id),
            user_id=str(uuid4()),
            text="Hijacked",
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_update_malformed_id_is_not_found(self, unit_env):
        """An ID that is not a UUID cannot match any comment."""
        use_case = await unit_env.get(UpdateCommentUseCase)

        request = UpdateCommentRequest(
            comment_id="not-a-uuid", user_id=str(uuid4()), text="x"
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(request)


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_get_comment_includes_likes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        liker = UserId(uuid4())
        comment = await comment_repo.save(
            make_comment(UserId(uuid4()), text="hello", likes=[liker])
        )

        # Act
        response = await use_case.execute(GetCommentRequest(comment_id=str(comment.id)))

        # Assert
        assert response.text == "hello"
        assert [like.user for like in response.likes] == [str(liker)]

    @pytest.mark.asyncio
    async def test_get_malformed_id_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id="123"))


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_comment_success(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = await comment_repo.save(make_comment(author_id))

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author_id))
        )

        # Assert
        assert response.msg == "Comment removed"
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_delete_comment_by_other_user_fails(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(UserId(uuid4())))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )

        assert await comment_repo.find_by_id(comment.id) is not None
