"""ASGI application for the comments API."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from murmur.config import Settings
from murmur.interface.api.errors import register_error_handlers
from murmur.interface.api.routes import comments, health
from murmur.interface.api.routes.health import API_VERSION
from murmur.util.di.container import (
    close_container_on_shutdown,
    create_container,
    setup_di,
)
from murmur.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Assemble the app around a DI container.

    Logfire is expected to be configured already (``scripts/start_app.py``
    in production, ``tests/conftest.py`` under pytest).

    Args:
        container: Container serving the routes; tests pass one built by
            ``tests.di.build_test_container``. Defaults to production.
    """
    settings = Settings()

    app = FastAPI(
        title="Murmur API",
        description="Comments on posts, with likes and author-only editing",
        version=API_VERSION,
        lifespan=close_container_on_shutdown,
    )
    instrument_fastapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Auth-Token"],
        max_age=600,
    )

    setup_di(app, container or create_container())
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(comments.router, prefix=settings.api.mount_path)

    return app


# Imported by uvicorn as murmur.interface.api.app:app
app = create_app()
