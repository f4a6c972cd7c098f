"""Dependency injection container."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from showcase.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its real implementation. Settings
    come from the environment through ProdConfigProvider.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app, replacing any previous one.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close whichever container is attached when the app shuts down.

    Closing releases APP-scoped resources such as the database engine.
    """
    yield
    await app.state.dishka_container.close()
