#!/usr/bin/env python3
"""Bring the database schema to a given Alembic revision (``head`` by default).

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a2b7d10
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from murmur.config import Settings
from murmur.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args(argv)

    configure_logfire(Settings())

    with logfire.span("migrations.upgrade", revision=args.revision):
        try:
            command.upgrade(Config("alembic.ini"), args.revision)
        except Exception as e:
            logfire.error(
                "Migration to {revision} failed",
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A half-migrated schema must stop the deploy
            raise

    logfire.info("Schema at {revision}", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
