"""Domain value objects for Showcase."""

from showcase.domain.value.identifiers import (
    CommentId,
    ProductId,
    UserId,
    VoteId,
)
from showcase.domain.value.types import (
    FacetCount,
    FacetType,
    Username,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProductId",
    "CommentId",
    "VoteId",
    # Types
    "FacetCount",
    "FacetType",
    "Username",
    "VoteValue",
]
