"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from murmur.domain.error import NotFoundError
from murmur.domain.repository import UserRepository
from murmur.domain.service import UserService
from murmur.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_returns_existing_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        # Act
        result = await user_service.get_by_id(user.id)

        # Assert
        assert result == user

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))
