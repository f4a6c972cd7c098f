"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Comment
from showcase.domain.repository import CommentRepository
from showcase.domain.value import CommentId, ProductId, UserId
from showcase.persistence.mappers import comment_to_dict, row_to_comment
from showcase.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID and lock its row."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_product(self, product_id: ProductId) -> List[Comment]:
        """Find all comments for a product, oldest first."""
        with logfire.span("comment_repository.find_by_product", product_id=product_id):
            stmt = (
                select(comments_table)
                .where(comments_table.c.product_id == product_id)
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId) -> List[Comment]:
        """Find comments written by a user, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.user_id == user_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_product(self, product_id: ProductId) -> None:
        """Delete every comment on a product."""
        stmt = delete(comments_table).where(comments_table.c.product_id == product_id)
        await self.session.execute(stmt)
        await self.session.flush()
