"""Get vote use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.model import Vote
from showcase.domain.service import VoteService
from showcase.domain.value import ProductId, UserId


class VoteItem(BaseModel):
    """Vote as returned by the API."""

    vote_id: int
    user_id: int
    product_id: int
    value: int

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteItem":
        """Build the API view of a stored vote."""
        assert vote.id is not None
        return cls(
            vote_id=vote.id,
            user_id=vote.user_id,
            product_id=vote.product_id,
            value=int(vote.value),
        )


class GetVoteRequest(BaseModel):
    """Get vote request."""

    acting_user_id: int | None = None
    product_id: int


class GetVoteResponse(BaseModel):
    """Get vote response. vote is None for anonymous users or no vote."""

    vote: VoteItem | None


class GetVoteUseCase(BaseUseCase):
    """Use case for looking up the acting user's vote on a product."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        """Execute get vote flow."""
        if request.acting_user_id is None:
            return GetVoteResponse(vote=None)

        vote = await self.vote_service.get_vote(
            UserId(request.acting_user_id), ProductId(request.product_id)
        )
        return GetVoteResponse(vote=VoteItem.from_vote(vote) if vote else None)
