"""Product domain service."""

from typing import Any

import logfire

from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.model.product import Product
from showcase.domain.repository import ProductRepository, ProductSortOrder
from showcase.domain.value import ProductId, UserId

from .base import Service

# Fields a product edit may never touch. Score moves through the vote ledger
# and featured through set_featured once a promotion is paid for.
PROTECTED_FIELDS = frozenset({"id", "user_id", "score", "featured", "created_at"})


class ProductService(Service):
    """Domain service for product operations."""

    def __init__(self, product_repository: ProductRepository) -> None:
        """Initialize product service.

        Args:
            product_repository: Product repository
        """
        self.product_repository = product_repository

    async def create_product(self, product: Product) -> Product:
        """Store a new product with a zero score.

        The owner's creation vote is cast separately by the vote service,
        which brings the score to 1.

        Args:
            product: Product to store (without ID)

        Returns:
            Stored product
        """
        with logfire.span(
            "product_service.create_product",
            title=product.title,
            user_id=product.user_id,
        ):
            saved = await self.product_repository.add(
                product.model_copy(update={"score": 0})
            )
            logfire.info("Product created", product_id=saved.id, title=saved.title)
            return saved

    async def get_product_by_id(self, product_id: ProductId) -> Product | None:
        """Get a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        with logfire.span("product_service.get_product_by_id", product_id=product_id):
            product = await self.product_repository.find_by_id(product_id)

            if product:
                logfire.info("Product found", product_id=product_id)
            else:
                logfire.warn("Product not found", product_id=product_id)

            return product

    async def lock_product(self, product_id: ProductId) -> Product | None:
        """Get a product and hold its row lock for the rest of the transaction.

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        with logfire.span("product_service.lock_product", product_id=product_id):
            return await self.product_repository.find_by_id_for_update(product_id)

    async def list_products(
        self, sort: ProductSortOrder = ProductSortOrder.NEWEST
    ) -> list[Product]:
        """List all products, featured first.

        Args:
            sort: Order within the featured and non-featured groups

        Returns:
            List of products
        """
        with logfire.span("product_service.list_products", sort=sort.value):
            products = await self.product_repository.find_all(sort=sort)
            logfire.info("Products listed", count=len(products))
            return products

    async def list_products_for_user(self, user_id: UserId) -> list[Product]:
        """List products submitted by a user."""
        return await self.product_repository.find_by_user(user_id)

    async def update_details(
        self, product: Product, changes: dict[str, Any]
    ) -> Product:
        """Apply descriptive changes to a product.

        Args:
            product: Current product
            changes: Field name to new value

        Returns:
            Updated product

        Raises:
            ValidationError: If a protected field (score, owner, ...) is included
                or a value is invalid
        """
        with logfire.span(
            "product_service.update_details",
            product_id=product.id,
            fields=sorted(changes),
        ):
            protected = PROTECTED_FIELDS.intersection(changes)
            if protected:
                logfire.warn(
                    "Attempt to set protected product fields",
                    product_id=product.id,
                    fields=sorted(protected),
                )
                raise ValidationError(
                    f"Fields cannot be updated directly: {', '.join(sorted(protected))}"
                )

            # model_copy skips validation, so rebuild to re-run field validators
            updated = Product.model_validate({**product.model_dump(), **changes})

            saved = await self.product_repository.update(updated)
            logfire.info("Product updated", product_id=saved.id)
            return saved

    async def apply_score_delta(self, product_id: ProductId, delta: int) -> int:
        """Atomically shift a product's score.

        Only the vote service calls this.

        Args:
            product_id: Product ID
            delta: Signed change

        Returns:
            New score
        """
        with logfire.span(
            "product_service.apply_score_delta", product_id=product_id, delta=delta
        ):
            score = await self.product_repository.add_to_score(product_id, delta)
            logfire.info("Product score updated", product_id=product_id, score=score)
            return score

    async def set_featured(self, product_id: ProductId, featured: bool) -> Product:
        """Promote a product to (or remove it from) the featured group.

        Not reachable from the product edit endpoint. Called once a
        promotion has been paid for.

        Raises:
            NotFoundError: If the product does not exist
        """
        with logfire.span(
            "product_service.set_featured", product_id=product_id, featured=featured
        ):
            if await self.product_repository.find_by_id(product_id) is None:
                raise NotFoundError("Product", str(product_id))

            product = await self.product_repository.set_featured(product_id, featured)
            logfire.info(
                "Product featured flag set", product_id=product_id, featured=featured
            )
            return product

    async def delete_product(self, product_id: ProductId) -> None:
        """Delete a product row.

        Args:
            product_id: Product ID
        """
        with logfire.span("product_service.delete_product", product_id=product_id):
            await self.product_repository.delete(product_id)
            logfire.info("Product deleted", product_id=product_id)
