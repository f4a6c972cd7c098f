"""Comment entity.

Comments are stored flat with an optional parent reference. Threads are
rebuilt on read by grouping on parent_id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import CommentId, ProductId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a product or a reply to another comment on the
    same product. parent_id is None for top-level comments.
    """

    id: Optional[CommentId] = None  # Assigned by the store on insert
    content: str = Field(max_length=10000)
    user_id: UserId
    product_id: ProductId
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_blank(self) -> bool:
        """Whether the content is empty once whitespace is stripped."""
        return not self.content.strip()
