"""Create comment use case."""

from pydantic import BaseModel, Field

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.service import CommentService, ProductService
from showcase.domain.value import CommentId, ProductId

from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    acting_user_id: int | None = None
    product_id: int
    content: str = Field(max_length=10000)
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a product or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        product_service: ProductService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            product_service: Product domain service
        """
        self.comment_service = comment_service
        self.product_service = product_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Require a session
        2. Reject blank content
        3. Verify the product exists
        4. Create the comment (service validates the parent)

        Raises:
            NotAuthenticatedError: If anonymous
            ValidationError: If content is blank or the parent is on another product
            NotFoundError: If the product or parent comment does not exist
        """
        user_id = require_user(request.acting_user_id, "comment")
        product_id = ProductId(request.product_id)

        if not request.content.strip():
            raise ValidationError("Comment content cannot be empty")

        product = await self.product_service.get_product_by_id(product_id)
        if not product:
            raise NotFoundError("Product", str(request.product_id))

        comment = await self.comment_service.create_comment(
            product_id=product_id,
            user_id=user_id,
            content=request.content,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
        )

        return CreateCommentResponse(comment=CommentItem.from_comment(comment))
