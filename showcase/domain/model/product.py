"""Product aggregate root.

A product is a submission that the community votes on and discusses.
Its ``score`` is a denormalized cache of the vote ledger.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from showcase.domain.model.common import DomainModel
from showcase.domain.value import ProductId, UserId


class Product(DomainModel):
    """Product aggregate root.

    Invariants:
    - score == sum of the values of all votes on the product
    - user_id (owner) never changes after creation
    - material holds each value at most once
    """

    id: Optional[ProductId] = None  # Assigned by the store on insert
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    company_name: str = Field(min_length=1, max_length=300)
    link: str
    image_url: str
    country: str = Field(min_length=1)
    material: list[str] = Field(default_factory=list)
    collection: str = Field(min_length=1)
    user_id: UserId
    score: int = Field(default=0, ge=0)
    featured: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("material")
    @classmethod
    def deduplicate_material(cls, v: list[str]) -> list[str]:
        """Treat materials as a set while keeping submission order."""
        return list(dict.fromkeys(m.strip() for m in v if m.strip()))

    def has_material(self, material: str) -> bool:
        """Whether this product's material set contains the value."""
        return material in self.material

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the given user submitted this product."""
        return self.user_id == user_id
