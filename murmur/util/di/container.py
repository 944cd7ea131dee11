"""Production container and its FastAPI wiring."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from murmur.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every component's production implementation.

    ``tests.di.build_test_container`` is the test-side counterpart that
    swaps mockable components for in-memory ones.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve FromDishka dependencies on ``app`` from ``container``."""
    setup_dishka(container, app)


@asynccontextmanager
async def close_container_on_shutdown(app: FastAPI) -> AsyncIterator[None]:
    """App lifespan that closes the container, disposing the database engine."""
    yield
    await app.state.dishka_container.close()
