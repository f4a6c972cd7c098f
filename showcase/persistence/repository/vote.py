"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import ProductId, UserId, VoteId, VoteValue
from showcase.persistence.mappers import row_to_vote, vote_to_dict
from showcase.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> Optional[Vote]:
        """Find a user's vote on a product."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.product_id == product_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == user_id)
            .order_by(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def add(self, vote: Vote) -> Vote:
        """Insert a new vote (raises IntegrityError on duplicates)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote)).returning(votes_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Vote:
        """Update a vote row in place."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(value=int(value))
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete_by_product(self, product_id: ProductId) -> None:
        """Delete every vote on a product."""
        stmt = delete(votes_table).where(votes_table.c.product_id == product_id)
        await self.session.execute(stmt)
        await self.session.flush()
