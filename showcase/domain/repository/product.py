"""Product repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from showcase.domain.model.product import Product
from showcase.domain.value import ProductId, UserId


class ProductSortOrder(str, Enum):
    """Sort order for product listings.

    Featured products always come first; the order applies within each group.
    """

    NEWEST = "newest"  # created_at DESC
    TOP = "top"  # score DESC, then created_at DESC


class ProductRepository(ABC):
    """Repository for Product aggregate.

    Defines the contract for product persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID.

        Args:
            product_id: The product's unique identifier

        Returns:
            The product if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID and lock its row until the transaction ends.

        Serializes concurrent vote read-modify-write cycles on one product.

        Args:
            product_id: The product's unique identifier

        Returns:
            The product if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, sort: ProductSortOrder = ProductSortOrder.NEWEST
    ) -> List[Product]:
        """Find all live products, featured first.

        Args:
            sort: Order applied within the featured and non-featured groups

        Returns:
            List of products
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Product]:
        """Find products submitted by a user, newest first."""
        pass

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Insert a new product.

        Args:
            product: Product without an ID

        Returns:
            The stored product with its assigned ID
        """
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Persist descriptive changes to an existing product.

        The score column is never written from here; use add_to_score.

        Args:
            product: Product with an ID

        Returns:
            The updated product (with the stored score)
        """
        pass

    @abstractmethod
    async def delete(self, product_id: ProductId) -> None:
        """Delete a product together with its votes and comments.

        Args:
            product_id: The product ID to delete
        """
        pass

    @abstractmethod
    async def add_to_score(self, product_id: ProductId, delta: int) -> int:
        """Atomically add delta to the product's score.

        Uses an SQL-level increment to avoid lost updates.

        Args:
            product_id: The product ID
            delta: Signed change to apply

        Returns:
            The new score
        """
        pass

    @abstractmethod
    async def set_featured(self, product_id: ProductId, featured: bool) -> Product:
        """Set the product's featured flag.

        Args:
            product_id: The product ID
            featured: New flag value

        Returns:
            The updated product
        """
        pass
