"""PostgreSQL repository implementations."""

from showcase.persistence.repository.comment import PostgresCommentRepository
from showcase.persistence.repository.product import PostgresProductRepository
from showcase.persistence.repository.user import PostgresUserRepository
from showcase.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProductRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
