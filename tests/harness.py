"""Fixture factory shared by unit and integration tests."""

import pytest_asyncio

from murmur.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture that yields a request-scoped container.

    Each test gets a fresh container, so in-memory repositories start empty.
    Unmocking ``persistence`` needs a migrated database at
    ``DATABASE__URL``.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_like(unit_env):
            service = await unit_env.get(CommentService)
    """

    @pytest_asyncio.fixture
    async def _environment():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _environment
