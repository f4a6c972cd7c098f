"""Logfire setup and instrumentation.

Application code logs and traces through logfire directly:

    with logfire.span("vote_service.cast_vote", product_id=product_id):
        logfire.info("Vote cast", product_id=product_id, user_id=user_id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from showcase.config import Settings

# Polled by load balancers; tracing them only adds noise
UNTRACED_PATHS = ["/health"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    observability = settings.observability

    logfire.configure(
        service_name="showcase-api",
        service_version=settings.version,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.should_send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=observability.should_send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health checks.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_PATHS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, tagging them with the active span.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound HTTP calls (the newsletter provider)."""
    logfire.instrument_httpx()
