"""Unit tests for the in-memory comment repository."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from murmur.domain.value import CommentId, UserId
from murmur.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


class TestInMemoryCommentRepository:
    """Unit tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_all_sorts_by_date_descending(self):
        # Arrange
        repo = InMemoryCommentRepository()
        author = UserId(uuid4())
        now = datetime.now(timezone.utc)
        old = await repo.save(make_comment(author, date=now - timedelta(days=2)))
        new = await repo.save(make_comment(author, date=now))

        # Act
        comments = await repo.find_all()

        # Assert
        assert [c.id for c in comments] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_save_replaces_existing(self):
        repo = InMemoryCommentRepository()
        comment = await repo.save(make_comment(UserId(uuid4()), text="v1"))

        await repo.save(comment.model_copy(update={"text": "v2"}))

        saved = await repo.find_by_id(comment.id)
        assert saved.text == "v2"
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self):
        repo = InMemoryCommentRepository()

        await repo.delete(CommentId(uuid4()))

        assert await repo.find_all() == []
