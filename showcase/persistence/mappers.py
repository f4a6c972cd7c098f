"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from showcase.domain.model import Comment, Product, User, Vote
from showcase.domain.value import (
    CommentId,
    ProductId,
    UserId,
    Username,
    VoteId,
    VoteValue,
)


def _without_id(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop a null id so the database assigns one."""
    if data.get("id") is None:
        data.pop("id", None)
    return data


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        is_subscribed_to_newsletter=row["is_subscribed_to_newsletter"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return _without_id(user.model_dump())


def row_to_product(row: Dict[str, Any]) -> Product:
    """Convert database row to Product domain model.

    Args:
        row: Database row as dict

    Returns:
        Product domain model
    """
    return Product(
        id=ProductId(row["id"]),
        title=row["title"],
        description=row.get("description") or "",
        company_name=row["company_name"],
        link=row["link"],
        image_url=row["image_url"],
        country=row["country"],
        material=list(row.get("material") or []),
        collection=row["collection"],
        user_id=UserId(row["user_id"]),
        score=row["score"],
        featured=row["featured"],
        created_at=row["created_at"],
    )


def product_to_dict(product: Product) -> Dict[str, Any]:
    """Convert Product domain model to database dict.

    Args:
        product: Product domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return _without_id(product.model_dump())


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        product_id=ProductId(row["product_id"]),
        value=VoteValue(row["value"]),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = _without_id(vote.model_dump())
    data["value"] = int(vote.value)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        content=row["content"],
        user_id=UserId(row["user_id"]),
        product_id=ProductId(row["product_id"]),
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _without_id(comment.model_dump())
