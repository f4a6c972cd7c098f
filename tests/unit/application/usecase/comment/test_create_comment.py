"""Unit tests for CreateCommentUseCase."""

import pytest

from showcase.application.usecase.comment import CreateCommentUseCase
from showcase.application.usecase.comment.create_comment import CreateCommentRequest
from showcase.domain.error import (
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from showcase.domain.repository import ProductRepository, UserRepository
from tests.conftest import make_product, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_and_reply(self, unit_env):
        """Should create a top-level comment and a reply to it."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_repo = await unit_env.get(ProductRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        user = await make_user(user_repo)
        product = await make_product(product_repo, user.id)

        # Act
        top = await use_case.execute(
            CreateCommentRequest(
                acting_user_id=user.id, product_id=product.id, content="Nice"
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                acting_user_id=user.id,
                product_id=product.id,
                content="Agreed",
                parent_id=top.comment.comment_id,
            )
        )

        # Assert
        assert top.comment.parent_id is None
        assert reply.comment.parent_id == top.comment.comment_id
        assert reply.comment.product_id == product.id

    @pytest.mark.asyncio
    async def test_missing_product(self, unit_env):
        """Should raise NotFoundError for an unknown product."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        user = await make_user(user_repo)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(acting_user_id=user.id, product_id=9, content="?")
            )

    @pytest.mark.asyncio
    async def test_blank_content_checked_before_product(self, unit_env):
        """Blank content on a missing product should be a validation error."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        user = await make_user(user_repo)

        # Act / Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(acting_user_id=user.id, product_id=9, content="  ")
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        """Should require a session."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(CreateCommentRequest(product_id=1, content="Hi"))
