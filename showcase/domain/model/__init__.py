"""Domain model entities for Showcase."""

from showcase.domain.model.comment import Comment
from showcase.domain.model.product import Product
from showcase.domain.model.user import User
from showcase.domain.model.vote import Vote

__all__ = [
    "User",
    "Product",
    "Comment",
    "Vote",
]
