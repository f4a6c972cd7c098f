"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import User
from showcase.domain.repository import UserRepository
from showcase.domain.value import UserId, Username
from showcase.persistence.mappers import row_to_user, user_to_dict
from showcase.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def add(self, user: User) -> User:
        """Insert a new user."""
        stmt = insert(users_table).values(**user_to_dict(user)).returning(users_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict())

    async def update(self, user: User) -> User:
        """Persist changes to an existing user."""
        data = user_to_dict(user)
        data.pop("created_at", None)
        stmt = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(**data)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict())
