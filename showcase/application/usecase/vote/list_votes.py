"""List votes use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import VoteService
from showcase.domain.value import UserId

from .get_vote import VoteItem


class ListVotesRequest(BaseModel):
    """List votes request."""

    acting_user_id: int | None = None


class ListVotesResponse(BaseModel):
    """List votes response."""

    votes: list[VoteItem]


class ListVotesUseCase(BaseUseCase):
    """Use case for listing the acting user's votes."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize list votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow. Anonymous callers get an empty list."""
        if request.acting_user_id is None:
            return ListVotesResponse(votes=[])

        votes = await self.vote_service.list_votes_for_user(
            UserId(request.acting_user_id)
        )
        return ListVotesResponse(votes=[VoteItem.from_vote(v) for v in votes])
