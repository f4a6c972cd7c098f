"""PostgreSQL implementation of Product repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Product
from showcase.domain.repository.product import ProductRepository, ProductSortOrder
from showcase.domain.value import ProductId, UserId
from showcase.persistence.mappers import product_to_dict, row_to_product
from showcase.persistence.tables import products_table

# Columns an edit may write. Score and ownership are never rewritten here.
EDITABLE_COLUMNS = (
    "title",
    "description",
    "company_name",
    "link",
    "image_url",
    "country",
    "material",
    "collection",
)


class PostgresProductRepository(ProductRepository):
    """PostgreSQL implementation of ProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        with logfire.span("product_repository.find_by_id", product_id=product_id):
            stmt = select(products_table).where(products_table.c.id == product_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Product not found", product_id=product_id)
                return None

            return row_to_product(row._asdict())

    async def find_by_id_for_update(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID and lock its row until the transaction ends."""
        stmt = (
            select(products_table)
            .where(products_table.c.id == product_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_product(row._asdict()) if row else None

    async def find_all(
        self, sort: ProductSortOrder = ProductSortOrder.NEWEST
    ) -> List[Product]:
        """Find all products, featured first."""
        with logfire.span("product_repository.find_all", sort=sort.value):
            stmt = select(products_table).order_by(desc(products_table.c.featured))

            if sort == ProductSortOrder.TOP:
                stmt = stmt.order_by(desc(products_table.c.score))

            stmt = stmt.order_by(
                desc(products_table.c.created_at), desc(products_table.c.id)
            )

            result = await self.session.execute(stmt)
            products = [row_to_product(row._asdict()) for row in result.fetchall()]
            logfire.info("Found products", count=len(products))
            return products

    async def find_by_user(self, user_id: UserId) -> List[Product]:
        """Find products submitted by a user, newest first."""
        stmt = (
            select(products_table)
            .where(products_table.c.user_id == user_id)
            .order_by(desc(products_table.c.created_at), desc(products_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_product(row._asdict()) for row in result.fetchall()]

    async def add(self, product: Product) -> Product:
        """Insert a new product."""
        with logfire.span("product_repository.add", title=product.title):
            stmt = (
                insert(products_table)
                .values(**product_to_dict(product))
                .returning(products_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_product(row._asdict())

    async def update(self, product: Product) -> Product:
        """Persist descriptive changes to a product."""
        data = product_to_dict(product)
        stmt = (
            update(products_table)
            .where(products_table.c.id == product.id)
            .values(**{column: data[column] for column in EDITABLE_COLUMNS})
            .returning(products_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_product(row._asdict())

    async def delete(self, product_id: ProductId) -> None:
        """Delete a product (hard delete)."""
        stmt = delete(products_table).where(products_table.c.id == product_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def add_to_score(self, product_id: ProductId, delta: int) -> int:
        """Atomically add delta to the score and return the new value."""
        stmt = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(score=products_table.c.score + delta)
            .returning(products_table.c.score)
        )
        result = await self.session.execute(stmt)
        score = result.scalar_one()
        await self.session.flush()
        return score

    async def set_featured(self, product_id: ProductId, featured: bool) -> Product:
        """Set the featured flag."""
        stmt = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(featured=featured)
            .returning(products_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_product(row._asdict())
