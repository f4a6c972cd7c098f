"""List facet products use case."""

from pydantic import BaseModel, Field

from showcase.application.usecase.base import BaseUseCase
from showcase.application.usecase.product.get_product import ProductItem
from showcase.domain.service import FacetService, ProductService
from showcase.domain.value import FacetType


class ListFacetProductsRequest(BaseModel):
    """List facet products request."""

    facet: FacetType
    value: str = Field(min_length=1)


class ListFacetProductsResponse(BaseModel):
    """List facet products response."""

    facet: FacetType
    value: str
    products: list[ProductItem]


class ListFacetProductsUseCase(BaseUseCase):
    """Use case for listing the products in one category bucket."""

    def __init__(
        self,
        facet_service: FacetService,
        product_service: ProductService,
    ) -> None:
        """Initialize list facet products use case.

        Args:
            facet_service: Facet domain service
            product_service: Product domain service
        """
        self.facet_service = facet_service
        self.product_service = product_service

    async def execute(
        self, request: ListFacetProductsRequest
    ) -> ListFacetProductsResponse:
        """Execute list facet products flow."""
        products = await self.product_service.list_products()
        matching = self.facet_service.filter(products, request.facet, request.value)
        return ListFacetProductsResponse(
            facet=request.facet,
            value=request.value,
            products=[ProductItem.from_product(p) for p in matching],
        )
