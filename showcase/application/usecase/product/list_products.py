"""List products use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.repository import ProductSortOrder
from showcase.domain.service import ProductService
from showcase.domain.value import UserId

from .get_product import ProductItem


class ListProductsRequest(BaseModel):
    """List products request."""

    sort: ProductSortOrder = ProductSortOrder.NEWEST
    user_id: int | None = None  # Restrict to one submitter


class ListProductsResponse(BaseModel):
    """List products response."""

    products: list[ProductItem]


class ListProductsUseCase(BaseUseCase):
    """Use case for the product feed and a user's submissions."""

    def __init__(self, product_service: ProductService) -> None:
        """Initialize list products use case.

        Args:
            product_service: Product domain service
        """
        self.product_service = product_service

    async def execute(self, request: ListProductsRequest) -> ListProductsResponse:
        """Execute list products flow."""
        if request.user_id is not None:
            products = await self.product_service.list_products_for_user(
                UserId(request.user_id)
            )
        else:
            products = await self.product_service.list_products(request.sort)

        return ListProductsResponse(
            products=[ProductItem.from_product(p) for p in products]
        )
