"""Get product use case."""

from datetime import datetime

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.error import NotFoundError
from showcase.domain.model import Product
from showcase.domain.service import ProductService
from showcase.domain.value import ProductId


class ProductItem(BaseModel):
    """Product as returned by the API."""

    product_id: int
    title: str
    description: str
    company_name: str
    link: str
    image_url: str
    country: str
    material: list[str]
    collection: str
    user_id: int
    score: int
    featured: bool
    created_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductItem":
        """Build the API view of a product."""
        assert product.id is not None
        return cls(
            product_id=product.id,
            title=product.title,
            description=product.description,
            company_name=product.company_name,
            link=product.link,
            image_url=product.image_url,
            country=product.country,
            material=list(product.material),
            collection=product.collection,
            user_id=product.user_id,
            score=product.score,
            featured=product.featured,
            created_at=product.created_at,
        )


class GetProductRequest(BaseModel):
    """Get product request."""

    product_id: int


class GetProductResponse(BaseModel):
    """Get product response."""

    product: ProductItem


class GetProductUseCase(BaseUseCase):
    """Use case for fetching a single product."""

    def __init__(self, product_service: ProductService) -> None:
        """Initialize get product use case.

        Args:
            product_service: Product domain service
        """
        self.product_service = product_service

    async def execute(self, request: GetProductRequest) -> GetProductResponse:
        """Execute get product flow.

        Raises:
            NotFoundError: If the product does not exist
        """
        product = await self.product_service.get_product_by_id(
            ProductId(request.product_id)
        )
        if product is None:
            raise NotFoundError("Product", str(request.product_id))

        return GetProductResponse(product=ProductItem.from_product(product))
