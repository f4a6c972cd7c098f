"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from showcase.domain.model.vote import Vote
from showcase.domain.value import ProductId, UserId, VoteId, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> Optional[Vote]:
        """Find a user's vote on a product.

        Args:
            user_id: The user's ID
            product_id: The product's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user.

        Args:
            user_id: The user's ID

        Returns:
            List of votes by the user
        """
        pass

    @abstractmethod
    async def add(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: Vote without an ID

        Returns:
            The stored vote with its assigned ID

        Raises:
            IntegrityError: If the user already has a vote on the product
        """
        pass

    @abstractmethod
    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Vote:
        """Update an existing vote row in place.

        Args:
            vote_id: The vote ID
            value: New vote value

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete_by_product(self, product_id: ProductId) -> None:
        """Delete every vote on a product (product deletion cascade)."""
        pass
