"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from showcase.domain.model.comment import Comment
from showcase.domain.value import CommentId, ProductId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_product(self, product_id: ProductId) -> List[Comment]:
        """Find all comments for a product as a flat list.

        Ordered by creation time (then ID) so that rebuilt threads are stable.

        Args:
            product_id: The product ID

        Returns:
            Flat list of comments
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Comment]:
        """Find comments written by a user, newest first."""
        pass

    @abstractmethod
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment and lock its row until the transaction ends.

        Replies insert under a key-share lock on the parent, so holding this
        lock keeps the reply count stable until the comment is deleted.
        """
        pass

    @abstractmethod
    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment.

        Args:
            comment_id: The parent comment ID

        Returns:
            Number of replies
        """
        pass

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: Comment without an ID

        Returns:
            The stored comment with its assigned ID
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment.

        Args:
            comment_id: ID of the comment to update
            content: New content

        Returns:
            Updated comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_product(self, product_id: ProductId) -> None:
        """Delete every comment on a product (product deletion cascade)."""
        pass
