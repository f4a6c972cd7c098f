"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.config import Settings
from showcase.interface.api.routes import (
    comments,
    facets,
    health,
    newsletter,
    products,
    users,
    votes,
)
from showcase.util.di.container import create_container, lifespan, setup_di
from showcase.util.observability import instrument_fastapi, instrument_httpx

ROUTERS = (
    health.router,
    products.router,
    comments.router,
    votes.router,
    facets.router,
    users.router,
    newsletter.router,
)


def create_app() -> FastAPI:
    """Create the FastAPI application wired to the production container.

    Logfire should already be configured; scripts/start_app.py does this.
    Tests call setup_di again to swap in a test container.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Showcase API",
        description="Discover, vote on and discuss products",
        version=settings.version,
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # Session cookie is sent cross-origin, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app_instance, create_container())

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Module-level instance for uvicorn
app = create_app()
