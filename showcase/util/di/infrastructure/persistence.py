"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from showcase.config import Settings
from showcase.domain.repository import (
    CommentRepository,
    ProductRepository,
    UserRepository,
    VoteRepository,
)
from showcase.persistence.database import create_engine, create_session_factory
from showcase.persistence.repository import (
    PostgresCommentRepository,
    PostgresProductRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from showcase.util.di.base import ProviderBase
from showcase.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide the four repository interfaces.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide the instrumented database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's transaction.

        Commits when the request finishes cleanly and rolls back on error, so
        a vote row and its score delta are stored together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Transaction rolled back", error=str(e))
                await session.rollback()
                raise

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    products = provide(
        PostgresProductRepository, provides=ProductRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    votes = provide(
        PostgresVoteRepository, provides=VoteRepository, scope=Scope.REQUEST
    )
