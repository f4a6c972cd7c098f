"""Category facet service.

Facet counts and listings are derived from the live product set on every
read; nothing here is stored.
"""

import logfire

from showcase.domain.model.product import Product
from showcase.domain.value import FacetCount, FacetType

from .base import Service


def facet_values(product: Product, facet: FacetType) -> list[str]:
    """Values a product contributes to a facet."""
    if facet is FacetType.MATERIALS:
        return list(product.material)
    if facet is FacetType.COUNTRIES:
        return [product.country]
    return [product.collection]


def in_bucket(product: Product, facet: FacetType, value: str) -> bool:
    """Whether a product belongs to one facet bucket."""
    if facet.is_multi_valued:
        return product.has_material(value)
    return facet_values(product, facet) == [value]


def compute_facet_counts(products: list[Product], facet: FacetType) -> dict[str, int]:
    """Count products per facet value.

    A product counts once per distinct value. The result is ordered by
    count descending, then value ascending, and only holds counts above zero.

    Args:
        products: Products to count
        facet: Facet dimension

    Returns:
        Ordered mapping of facet value to product count
    """
    counts: dict[str, int] = {}
    for product in products:
        for value in set(facet_values(product, facet)):
            counts[value] = counts.get(value, 0) + 1

    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return {name: count for name, count in ordered if count > 0}


def filter_products_by_facet(
    products: list[Product], facet: FacetType, value: str
) -> list[Product]:
    """Select the products in one facet bucket.

    Materials match on membership, countries and collections on equality.
    Featured products come first; each group is ordered newest first.
    """
    matching = [p for p in products if in_bucket(p, facet, value)]
    matching.sort(key=lambda p: p.created_at, reverse=True)
    # Stable sort keeps the newest-first order inside each group
    matching.sort(key=lambda p: not p.featured)
    return matching


class FacetService(Service):
    """Domain service for browsing products by category."""

    def count(self, products: list[Product], facet: FacetType) -> list[FacetCount]:
        """Facet counts as value objects, in display order."""
        with logfire.span(
            "facet_service.count", facet=facet.value, product_count=len(products)
        ):
            counts = compute_facet_counts(products, facet)
            logfire.info("Facet counts computed", facet=facet.value, buckets=len(counts))
            return [FacetCount(name=name, count=count) for name, count in counts.items()]

    def filter(
        self, products: list[Product], facet: FacetType, value: str
    ) -> list[Product]:
        """Products in a facet bucket, featured first then newest."""
        with logfire.span("facet_service.filter", facet=facet.value, value=value):
            return filter_products_by_facet(products, facet, value)
