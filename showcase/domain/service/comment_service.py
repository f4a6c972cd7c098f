"""Comment domain service."""

from datetime import datetime

import logfire

from showcase.domain.error import (
    CommentHasRepliesError,
    NotFoundError,
    ValidationError,
)
from showcase.domain.model.comment import Comment
from showcase.domain.repository import CommentRepository
from showcase.domain.value import CommentId, ProductId, UserId

from .base import Service
from .comment_tree import DEFAULT_MAX_DEPTH, CommentNode, build_comment_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_depth: Number of thread levels rendered by get_comment_tree
        """
        self.comment_repository = comment_repository
        self.max_depth = max_depth

    @staticmethod
    def _clean_content(content: str) -> str:
        cleaned = content.strip()
        if not cleaned:
            raise ValidationError("Comment content cannot be empty")
        return cleaned

    async def create_comment(
        self,
        product_id: ProductId,
        user_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a product or reply to another comment.

        Args:
            product_id: Product ID (caller verifies it exists)
            user_id: Author user ID
            content: Comment text, stored trimmed
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is blank or the parent is on another product
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            product_id=product_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            cleaned = self._clean_content(content)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        product_id=product_id,
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.product_id != product_id:
                    logfire.warn(
                        "Parent comment does not belong to product",
                        parent_id=parent_id,
                        parent_product_id=parent.product_id,
                        target_product_id=product_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this product"
                    )

            comment = Comment(
                content=cleaned,
                user_id=user_id,
                product_id=product_id,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.add(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                product_id=product_id,
                user_id=user_id,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comments_for_product(self, product_id: ProductId) -> list[Comment]:
        """Get a product's comments as a flat list, oldest first."""
        with logfire.span(
            "comment_service.get_comments_for_product", product_id=product_id
        ):
            comments = await self.comment_repository.find_by_product(product_id)
            logfire.info(
                "Comments retrieved", product_id=product_id, count=len(comments)
            )
            return comments

    async def get_comment_tree(self, product_id: ProductId) -> list[CommentNode]:
        """Get a product's comments nested into depth-bounded threads."""
        comments = await self.get_comments_for_product(product_id)
        return build_comment_tree(comments, max_depth=self.max_depth)

    async def get_comments_for_user(self, user_id: UserId) -> list[Comment]:
        """Get comments written by a user, newest first."""
        return await self.comment_repository.find_by_user(user_id)

    async def update_content(self, comment: Comment, content: str) -> Comment:
        """Replace the content of a comment.

        Args:
            comment: Existing comment
            content: New text, stored trimmed

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the comment vanished
        """
        assert comment.id is not None
        with logfire.span("comment_service.update_content", comment_id=comment.id):
            cleaned = self._clean_content(content)
            updated = await self.comment_repository.update_content(comment.id, cleaned)
            if not updated:
                raise NotFoundError("Comment", str(comment.id))
            logfire.info("Comment updated", comment_id=comment.id)
            return updated

    async def delete_comment(self, comment: Comment) -> None:
        """Hard-delete a comment that has no replies.

        Args:
            comment: Comment to delete

        Raises:
            NotFoundError: If the comment was deleted concurrently
            CommentHasRepliesError: If the comment has replies
        """
        assert comment.id is not None
        with logfire.span("comment_service.delete_comment", comment_id=comment.id):
            # Lock first so a reply cannot land between the count and the delete
            if await self.comment_repository.find_by_id_for_update(comment.id) is None:
                raise NotFoundError("Comment", str(comment.id))

            reply_count = await self.comment_repository.count_children(comment.id)
            if reply_count > 0:
                logfire.warn(
                    "Delete blocked by replies",
                    comment_id=comment.id,
                    reply_count=reply_count,
                )
                raise CommentHasRepliesError(str(comment.id), reply_count)

            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=comment.id)

    async def delete_comments_for_product(self, product_id: ProductId) -> None:
        """Remove every comment on a product (product deletion)."""
        await self.comment_repository.delete_by_product(product_id)
