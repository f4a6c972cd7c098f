#!/usr/bin/env python3
"""Apply Alembic migrations.

Usage: run_migrations.py [REVISION]   (default: head)

Run before the API starts; a failure exits non-zero so the deploy halts
instead of serving against a stale schema.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from showcase.config import Settings
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    revision = argv[0] if argv else "head"
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))

    with logfire.span(
        "Upgrading schema", revision=revision, environment=settings.environment
    ):
        try:
            command.upgrade(config, revision)
        except Exception:
            logfire.exception("Migration failed", revision=revision)
            raise

    logfire.info("Schema is at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
