"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.model import Comment
from showcase.domain.service import CommentService
from showcase.domain.value import ProductId, UserId


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    comment_id: int
    product_id: int
    user_id: int
    content: str
    parent_id: int | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build the API view of a stored comment."""
        assert comment.id is not None
        return cls(
            comment_id=comment.id,
            product_id=comment.product_id,
            user_id=comment.user_id,
            content=comment.content,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request.

    Set product_id for a product's discussion or user_id for a user's history.
    """

    product_id: int | None = None
    user_id: int | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase(BaseUseCase):
    """Use case for flat comment listings."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Product listings are oldest first; user listings are newest first.

        Raises:
            ValueError: If neither product_id nor user_id is given
        """
        if request.product_id is not None:
            comments = await self.comment_service.get_comments_for_product(
                ProductId(request.product_id)
            )
        elif request.user_id is not None:
            comments = await self.comment_service.get_comments_for_user(
                UserId(request.user_id)
            )
        else:
            raise ValueError("product_id or user_id is required")

        return GetCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments]
        )
