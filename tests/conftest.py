"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from showcase.domain.model.comment import Comment
from showcase.domain.model.product import Product
from showcase.domain.model.user import User
from showcase.domain.repository import (
    CommentRepository,
    ProductRepository,
    UserRepository,
)
from showcase.domain.value import CommentId, ProductId, UserId, Username

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


async def make_user(
    user_repo: UserRepository,
    username: str = "maker",
    email: str | None = None,
) -> User:
    """Helper to store a test user."""
    return await user_repo.add(User(username=Username(username), email=email))


async def make_product(
    product_repo: ProductRepository,
    user_id: UserId,
    title: str = "Oak Desk",
    material: list[str] | None = None,
    country: str = "Ireland",
    collection: str = "Furniture",
    featured: bool = False,
    minutes_ago: int = 0,
) -> Product:
    """Helper to store a test product with score 0.

    Stored straight through the repository, so no creation vote is cast.
    """
    return await product_repo.add(
        Product(
            title=title,
            description="Made by hand",
            company_name="Acme Workshop",
            link="https://example.com/product",
            image_url="https://example.com/product.jpg",
            country=country,
            material=material if material is not None else ["Oak"],
            collection=collection,
            user_id=user_id,
            featured=featured,
            created_at=BASE_TIME - timedelta(minutes=minutes_ago),
        )
    )


async def make_comment(
    comment_repo: CommentRepository,
    product_id: ProductId,
    user_id: UserId,
    content: str = "Lovely piece",
    parent_id: CommentId | None = None,
) -> Comment:
    """Helper to store a test comment."""
    return await comment_repo.add(
        Comment(
            content=content,
            user_id=user_id,
            product_id=product_id,
            parent_id=parent_id,
        )
    )
