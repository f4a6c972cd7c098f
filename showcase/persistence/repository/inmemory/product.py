"""In-memory product repository for testing."""

from itertools import count
from typing import Optional

from showcase.domain.model.product import Product
from showcase.domain.repository.product import ProductRepository, ProductSortOrder
from showcase.domain.value import ProductId, UserId

EDITABLE_FIELDS = (
    "title",
    "description",
    "company_name",
    "link",
    "image_url",
    "country",
    "material",
    "collection",
)


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository for testing."""

    def __init__(self) -> None:
        self._products: dict[ProductId, Product] = {}
        self._ids = count(1)

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        return self._products.get(product_id)

    async def find_by_id_for_update(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID (no locking needed in a single process)."""
        return self._products.get(product_id)

    async def find_all(
        self, sort: ProductSortOrder = ProductSortOrder.NEWEST
    ) -> list[Product]:
        """Find all products, featured first."""
        products = sorted(
            self._products.values(),
            key=lambda p: (p.created_at, p.id),
            reverse=True,
        )
        if sort == ProductSortOrder.TOP:
            products.sort(key=lambda p: p.score, reverse=True)
        products.sort(key=lambda p: not p.featured)
        return products

    async def find_by_user(self, user_id: UserId) -> list[Product]:
        """Find products submitted by a user, newest first."""
        return sorted(
            (p for p in self._products.values() if p.user_id == user_id),
            key=lambda p: (p.created_at, p.id),
            reverse=True,
        )

    async def add(self, product: Product) -> Product:
        """Insert a new product with the next ID."""
        stored = product.model_copy(update={"id": ProductId(next(self._ids))})
        self._products[stored.id] = stored
        return stored

    async def update(self, product: Product) -> Product:
        """Apply descriptive changes, keeping the stored score and owner."""
        assert product.id is not None
        current = self._products[product.id]
        updated = current.model_copy(
            update={field: getattr(product, field) for field in EDITABLE_FIELDS}
        )
        self._products[product.id] = updated
        return updated

    async def delete(self, product_id: ProductId) -> None:
        """Delete a product."""
        self._products.pop(product_id, None)

    async def add_to_score(self, product_id: ProductId, delta: int) -> int:
        """Add delta to the stored score."""
        current = self._products[product_id]
        updated = current.model_copy(update={"score": current.score + delta})
        self._products[product_id] = updated
        return updated.score

    async def set_featured(self, product_id: ProductId, featured: bool) -> Product:
        """Set the featured flag."""
        updated = self._products[product_id].model_copy(update={"featured": featured})
        self._products[product_id] = updated
        return updated
