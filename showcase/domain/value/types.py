"""Domain value objects for Showcase.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable record compared by its fields."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, read through ``.root``."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class VoteValue(IntEnum):
    """Value of a vote.

    There are no downvotes: NONE is a retracted (or never cast) vote.
    """

    NONE = 0
    UP = 1


class FacetType(str, Enum):
    """Taxonomy dimension used to browse products."""

    MATERIALS = "materials"
    COUNTRIES = "countries"
    COLLECTIONS = "collections"

    @property
    def is_multi_valued(self) -> bool:
        """Whether a product can belong to several buckets of this facet."""
        return self is FacetType.MATERIALS


class Username(RootValueObject[str]):
    """Public username.

    Unique across users, 1-50 characters, no surrounding whitespace.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is non-blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v


class FacetCount(ValueObject):
    """Number of live products in one facet bucket."""

    name: str
    count: int
