"""Category facet routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from showcase.application.usecase.facet import (
    GetFacetCountsRequest,
    GetFacetCountsResponse,
    GetFacetCountsUseCase,
    ListFacetProductsRequest,
    ListFacetProductsResponse,
    ListFacetProductsUseCase,
)
from showcase.domain.value import FacetType

router = APIRouter(prefix="/facets", tags=["facets"], route_class=DishkaRoute)


@router.get("/{facet}", response_model=GetFacetCountsResponse)
async def get_facet_counts(
    facet: FacetType,
    get_facet_counts_use_case: FromDishka[GetFacetCountsUseCase],
) -> GetFacetCountsResponse:
    """Count products per value of a facet (materials, countries, collections).

    Args:
        facet: Facet dimension
        get_facet_counts_use_case: Get facet counts use case from DI

    Returns:
        Buckets ordered by count, then name
    """
    return await get_facet_counts_use_case.execute(GetFacetCountsRequest(facet=facet))


@router.get("/{facet}/{value}/products", response_model=ListFacetProductsResponse)
async def list_facet_products(
    facet: FacetType,
    value: str,
    list_facet_products_use_case: FromDishka[ListFacetProductsUseCase],
) -> ListFacetProductsResponse:
    """List the products in a facet bucket, featured first then newest."""
    return await list_facet_products_use_case.execute(
        ListFacetProductsRequest(facet=facet, value=value)
    )
