"""Cast vote use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.error import ValidationError
from showcase.domain.service import ProductService, VoteService
from showcase.domain.value import ProductId, VoteValue


class CastVoteRequest(BaseModel):
    """Cast vote request.

    value is 1 to upvote and 0 to retract. It is checked by the use case so
    an out-of-range value surfaces as a domain validation error.
    """

    acting_user_id: int | None = None
    product_id: int
    value: int


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: int | None  # None when there was nothing to retract
    product_id: int
    value: int
    score: int  # Product score after the vote


class CastVoteUseCase(BaseUseCase):
    """Use case for setting the acting user's vote on a product."""

    def __init__(
        self,
        vote_service: VoteService,
        product_service: ProductService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            product_service: Product domain service
        """
        self.vote_service = vote_service
        self.product_service = product_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotAuthenticatedError: If anonymous
            ValidationError: If value is not 0 or 1
            NotFoundError: If the product does not exist
            SelfVoteError: If the user owns the product
        """
        user_id = require_user(request.acting_user_id, "vote")

        try:
            value = VoteValue(request.value)
        except ValueError:
            raise ValidationError(f"Vote value must be 0 or 1, got {request.value}")

        product_id = ProductId(request.product_id)
        vote = await self.vote_service.cast_vote(user_id, product_id, value)

        product = await self.product_service.get_product_by_id(product_id)
        assert product is not None

        return CastVoteResponse(
            vote_id=vote.id,
            product_id=vote.product_id,
            value=int(vote.value),
            score=product.score,
        )
