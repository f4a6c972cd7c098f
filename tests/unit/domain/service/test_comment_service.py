"""Unit tests for CommentService."""

import pytest

from showcase.domain.error import (
    CommentHasRepliesError,
    NotFoundError,
    ValidationError,
)
from showcase.domain.repository import ProductRepository, UserRepository
from showcase.domain.service import CommentService
from showcase.domain.value import CommentId
from tests.conftest import make_product, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _setup(unit_env):
    user_repo = await unit_env.get(UserRepository)
    product_repo = await unit_env.get(ProductRepository)
    comment_service = await unit_env.get(CommentService)

    user = await make_user(user_repo, "commenter")
    product = await make_product(product_repo, user.id)
    other = await make_product(product_repo, user.id, title="Steel Lamp")
    return comment_service, user, product, other


class TestCreateComment:
    """Tests for CommentService.create_comment."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Should store a trimmed top-level comment."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)

        # Act
        comment = await comment_service.create_comment(
            product.id, user.id, "  Great grain on this one  "
        )

        # Assert
        assert comment.id is not None
        assert comment.content == "Great grain on this one"
        assert comment.parent_id is None
        assert comment.product_id == product.id

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Should attach a reply to its parent."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        parent = await comment_service.create_comment(product.id, user.id, "Parent")

        # Act
        reply = await comment_service.create_comment(
            product.id, user.id, "Reply", parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_rejected(self, unit_env, content):
        """Should reject empty and whitespace-only content."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)

        # Act / Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(product.id, user.id, content)

        assert await comment_service.get_comments_for_product(product.id) == []

    @pytest.mark.asyncio
    async def test_missing_parent_rejected(self, unit_env):
        """Should raise NotFoundError when the parent does not exist."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                product.id, user.id, "Orphan", parent_id=CommentId(404)
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_product_rejected(self, unit_env):
        """Should reject a reply whose parent belongs to another product."""
        # Arrange
        comment_service, user, product, other = await _setup(unit_env)
        parent = await comment_service.create_comment(other.id, user.id, "Elsewhere")

        # Act / Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                product.id, user.id, "Cross-thread", parent_id=parent.id
            )


class TestUpdateContent:
    """Tests for CommentService.update_content."""

    @pytest.mark.asyncio
    async def test_update_content(self, unit_env):
        """Should replace the content."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        comment = await comment_service.create_comment(product.id, user.id, "Frist")

        # Act
        updated = await comment_service.update_content(comment, "First")

        # Assert
        assert updated.content == "First"
        stored = await comment_service.get_comment_by_id(comment.id)
        assert stored.content == "First"

    @pytest.mark.asyncio
    async def test_update_to_blank_rejected(self, unit_env):
        """Should reject blank replacement content."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        comment = await comment_service.create_comment(product.id, user.id, "Text")

        # Act / Assert
        with pytest.raises(ValidationError):
            await comment_service.update_content(comment, "   ")


class TestDeleteComment:
    """Tests for CommentService.delete_comment."""

    @pytest.mark.asyncio
    async def test_delete_leaf(self, unit_env):
        """Should delete a comment without replies."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        comment = await comment_service.create_comment(product.id, user.id, "Bye")

        # Act
        await comment_service.delete_comment(comment)

        # Assert
        assert await comment_service.get_comment_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_delete_with_replies_blocked(self, unit_env):
        """Should refuse to delete a comment that has replies."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        parent = await comment_service.create_comment(product.id, user.id, "Parent")
        await comment_service.create_comment(
            product.id, user.id, "Child", parent_id=parent.id
        )

        # Act / Assert
        with pytest.raises(CommentHasRepliesError) as exc_info:
            await comment_service.delete_comment(parent)

        assert exc_info.value.reply_count == 1
        assert await comment_service.get_comment_by_id(parent.id) is not None

    @pytest.mark.asyncio
    async def test_delete_already_removed(self, unit_env):
        """Should raise NotFoundError when the row is gone by delete time."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        comment = await comment_service.create_comment(product.id, user.id, "Once")
        await comment_service.delete_comment(comment)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(comment)


class TestGetCommentTree:
    """Tests for CommentService.get_comment_tree."""

    @pytest.mark.asyncio
    async def test_tree_is_depth_bounded_but_flat_list_is_not(self, unit_env):
        """A chain of 10 replies should render 6 levels and list all 10."""
        # Arrange
        comment_service, user, product, _ = await _setup(unit_env)
        parent_id = None
        for i in range(10):
            comment = await comment_service.create_comment(
                product.id, user.id, f"Level {i}", parent_id=parent_id
            )
            parent_id = comment.id

        # Act
        tree = await comment_service.get_comment_tree(product.id)
        flat = await comment_service.get_comments_for_product(product.id)

        # Assert
        assert len(flat) == 10

        depth = 0
        node = tree[0]
        while node.children:
            node = node.children[0]
            depth += 1
        assert depth == 5
        assert node.comment.content == "Level 5"
