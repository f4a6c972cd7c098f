#!/usr/bin/env python3
"""Serve the API under uvicorn.

Logfire is configured before the app module is imported, so import-time
failures (bad settings, broken DI graph) are reported too.
"""

import argparse
import sys

import logfire
import uvicorn

from showcase.config import Settings
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire

APP_PATH = "showcase.interface.api.app:app"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Showcase API")
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument(
        "--reload", action="store_true", help="restart on code changes (dev only)"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    port = args.port or settings.port

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Serving API",
        port=port,
        environment=settings.environment,
        version=settings.version,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=port,
            reload=args.reload and settings.environment == "development",
            proxy_headers=True,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
