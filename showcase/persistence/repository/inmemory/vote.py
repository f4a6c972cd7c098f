"""In-memory vote repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from showcase.domain.model.vote import Vote
from showcase.domain.repository.vote import VoteRepository
from showcase.domain.value import ProductId, UserId, VoteId, VoteValue


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}
        self._ids = count(1)

    async def find_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> Optional[Vote]:
        """Find a user's vote on a product."""
        for vote in self._votes.values():
            if vote.user_id == user_id and vote.product_id == product_id:
                return vote
        return None

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find all votes by a user."""
        return [v for v in self._votes.values() if v.user_id == user_id]

    async def add(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If the user already has a vote on the product
        """
        existing = await self.find_by_user_and_product(vote.user_id, vote.product_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        stored = vote.model_copy(update={"id": VoteId(next(self._ids))})
        self._votes[stored.id] = stored
        return stored

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Vote:
        """Update a vote row in place."""
        updated = self._votes[vote_id].model_copy(update={"value": value})
        self._votes[vote_id] = updated
        return updated

    async def delete_by_product(self, product_id: ProductId) -> None:
        """Delete every vote on a product."""
        self._votes = {
            vote_id: vote
            for vote_id, vote in self._votes.items()
            if vote.product_id != product_id
        }
