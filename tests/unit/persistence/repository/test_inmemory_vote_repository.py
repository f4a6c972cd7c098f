"""Unit tests for the in-memory vote repository."""

import pytest
from sqlalchemy.exc import IntegrityError

from showcase.domain.model.vote import Vote
from showcase.domain.value import ProductId, UserId, VoteValue
from showcase.persistence.repository.inmemory import InMemoryVoteRepository


class TestInMemoryVoteRepository:
    """Tests mirroring the database's one-vote-per-user constraint."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_rejected(self):
        """A second row for the same user and product should fail."""
        # Arrange
        repo = InMemoryVoteRepository()
        vote = Vote(user_id=UserId(1), product_id=ProductId(1))
        await repo.add(vote)

        # Act / Assert
        with pytest.raises(IntegrityError):
            await repo.add(vote)

    @pytest.mark.asyncio
    async def test_update_value_in_place(self):
        """Updating a vote should keep its ID."""
        # Arrange
        repo = InMemoryVoteRepository()
        stored = await repo.add(Vote(user_id=UserId(1), product_id=ProductId(1)))

        # Act
        updated = await repo.update_value(stored.id, VoteValue.NONE)

        # Assert
        assert updated.id == stored.id
        assert updated.value == VoteValue.NONE
        assert await repo.find_by_user(UserId(1)) == [updated]
