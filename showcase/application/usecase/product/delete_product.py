"""Delete product use case."""

import logfire
from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.error import NotAuthorizedError, NotFoundError
from showcase.domain.service import CommentService, ProductService, VoteService
from showcase.domain.value import ProductId


class DeleteProductRequest(BaseModel):
    """Delete product request."""

    acting_user_id: int | None = None
    product_id: int


class DeleteProductResponse(BaseModel):
    """Delete product response."""

    product_id: int
    deleted: bool = True


class DeleteProductUseCase(BaseUseCase):
    """Use case for removing a product along with its votes and comments."""

    def __init__(
        self,
        product_service: ProductService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete product use case.

        Args:
            product_service: Product domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.product_service = product_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteProductRequest) -> DeleteProductResponse:
        """Execute delete product flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the product does not exist
            NotAuthorizedError: If the user does not own the product
        """
        user_id = require_user(request.acting_user_id, "delete a product")
        product_id = ProductId(request.product_id)

        with logfire.span("delete_product", product_id=product_id, user_id=user_id):
            product = await self.product_service.lock_product(product_id)
            if product is None:
                raise NotFoundError("Product", str(request.product_id))

            if not product.is_owned_by(user_id):
                raise NotAuthorizedError("product", str(product_id), str(user_id))

            await self.vote_service.delete_votes_for_product(product_id)
            await self.comment_service.delete_comments_for_product(product_id)
            await self.product_service.delete_product(product_id)

            return DeleteProductResponse(product_id=product_id)
