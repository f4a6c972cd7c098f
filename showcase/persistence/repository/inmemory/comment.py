"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from showcase.domain.model.comment import Comment
from showcase.domain.repository.comment import CommentRepository
from showcase.domain.value import CommentId, ProductId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID (no locking needed in a single process)."""
        return self._comments.get(comment_id)

    async def find_by_product(self, product_id: ProductId) -> list[Comment]:
        """Find all comments for a product, oldest first."""
        return sorted(
            (c for c in self._comments.values() if c.product_id == product_id),
            key=lambda c: (c.created_at, c.id),
        )

    async def find_by_user(self, user_id: UserId) -> list[Comment]:
        """Find comments written by a user, newest first."""
        return sorted(
            (c for c in self._comments.values() if c.user_id == user_id),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        return sum(1 for c in self._comments.values() if c.parent_id == comment_id)

    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment with the next ID."""
        stored = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[stored.id] = stored
        return stored

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(update={"content": content})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_product(self, product_id: ProductId) -> None:
        """Delete every comment on a product."""
        self._comments = {
            comment_id: comment
            for comment_id, comment in self._comments.items()
            if comment.product_id != product_id
        }
