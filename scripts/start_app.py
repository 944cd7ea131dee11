#!/usr/bin/env python3
"""Serve the comments API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
failures during startup are reported too.
"""

import argparse
import sys

import logfire
import uvicorn

from murmur.config import Settings
from murmur.util.logging import setup_logging
from murmur.util.observability import configure_logfire

APP = "murmur.interface.api.app:app"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the comments API")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Serving {app} on {host}:{port}",
        app=APP,
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            reload=args.reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("API server failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
