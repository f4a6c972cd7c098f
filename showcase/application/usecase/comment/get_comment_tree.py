"""Get comment tree use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import CommentNode, CommentService
from showcase.domain.value import ProductId

from .get_comments import CommentItem


class CommentTreeItem(CommentItem):
    """Comment with its rendered replies."""

    depth: int
    replies: list["CommentTreeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentTreeItem":
        """Build the API view of a thread node, recursively."""
        item = CommentItem.from_comment(node.comment)
        return cls(
            **item.model_dump(),
            depth=node.depth,
            replies=[cls.from_node(child) for child in node.children],
        )


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    product_id: int


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    comments: list[CommentTreeItem]


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for a product's threaded discussion."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow."""
        roots = await self.comment_service.get_comment_tree(
            ProductId(request.product_id)
        )
        return GetCommentTreeResponse(
            comments=[CommentTreeItem.from_node(node) for node in roots]
        )
