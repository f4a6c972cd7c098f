"""Shared base for Showcase entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Entities carry an ``id`` that the store assigns on insert; changes are
    made by copying, never by mutating in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned this entity an id."""
        return getattr(self, "id", None) is not None
