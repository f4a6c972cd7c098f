"""Console logging for libraries that use the standard logging module.

Application events go through logfire; this only sets levels so uvicorn,
SQLAlchemy and httpx output stays readable.
"""

import logging
import sys

from showcase.config import Settings

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the current environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    # SQL echo is controlled by the engine's echo flag, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
