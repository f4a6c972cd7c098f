"""Facet use cases."""

from .get_facet_counts import (
    FacetCountItem,
    GetFacetCountsRequest,
    GetFacetCountsResponse,
    GetFacetCountsUseCase,
)
from .list_facet_products import (
    ListFacetProductsRequest,
    ListFacetProductsResponse,
    ListFacetProductsUseCase,
)

__all__ = [
    "FacetCountItem",
    "GetFacetCountsRequest",
    "GetFacetCountsResponse",
    "GetFacetCountsUseCase",
    "ListFacetProductsRequest",
    "ListFacetProductsResponse",
    "ListFacetProductsUseCase",
]
