"""Repository interfaces for Showcase domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from showcase.domain.repository.comment import CommentRepository
from showcase.domain.repository.product import ProductRepository, ProductSortOrder
from showcase.domain.repository.user import UserRepository
from showcase.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "ProductSortOrder",
    "CommentRepository",
    "VoteRepository",
]
