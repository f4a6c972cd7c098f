"""Get facet counts use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import FacetService, ProductService
from showcase.domain.value import FacetType


class FacetCountItem(BaseModel):
    """One facet bucket."""

    name: str
    count: int


class GetFacetCountsRequest(BaseModel):
    """Get facet counts request."""

    facet: FacetType


class GetFacetCountsResponse(BaseModel):
    """Get facet counts response, ordered by count then name."""

    facet: FacetType
    counts: list[FacetCountItem]


class GetFacetCountsUseCase(BaseUseCase):
    """Use case for the category browser's bucket counts."""

    def __init__(
        self,
        facet_service: FacetService,
        product_service: ProductService,
    ) -> None:
        """Initialize get facet counts use case.

        Args:
            facet_service: Facet domain service
            product_service: Product domain service
        """
        self.facet_service = facet_service
        self.product_service = product_service

    async def execute(self, request: GetFacetCountsRequest) -> GetFacetCountsResponse:
        """Execute get facet counts flow."""
        products = await self.product_service.list_products()
        counts = self.facet_service.count(products, request.facet)
        return GetFacetCountsResponse(
            facet=request.facet,
            counts=[FacetCountItem(name=c.name, count=c.count) for c in counts],
        )
