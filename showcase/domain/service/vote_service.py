"""Vote domain service.

The vote ledger is the source of truth for product scores. Every change to a
vote row and the matching score delta happen inside one transaction, after
the product row has been locked, so concurrent toggles by the same user are
serialized and the cached score never drifts from the ledger.
"""

import logfire

from showcase.domain.error import NotFoundError, SelfVoteError
from showcase.domain.model.product import Product
from showcase.domain.model.vote import Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import ProductId, UserId, VoteValue

from .base import Service
from .product_service import ProductService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        product_service: ProductService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            product_service: Product domain service
        """
        self.vote_repository = vote_repository
        self.product_service = product_service

    async def cast_vote(
        self, user_id: UserId, product_id: ProductId, value: VoteValue
    ) -> Vote:
        """Set a user's vote on a product to the given value.

        Idempotent: casting the value the user already holds changes nothing.
        Casting 0 without an existing vote returns an unsaved vote with value 0.

        Args:
            user_id: Voting user ID
            product_id: Product ID
            value: Desired vote value

        Returns:
            The user's vote after the operation

        Raises:
            NotFoundError: If the product does not exist
            SelfVoteError: If the user owns the product
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=user_id,
            product_id=product_id,
            value=int(value),
        ):
            # Lock first: everything below reads and writes under the row lock
            product = await self.product_service.lock_product(product_id)
            if not product:
                logfire.warn("Vote on non-existent product", product_id=product_id)
                raise NotFoundError("Product", str(product_id))

            if product.is_owned_by(user_id):
                logfire.warn(
                    "Self-vote attempt", product_id=product_id, user_id=user_id
                )
                raise SelfVoteError(str(product_id), str(user_id))

            existing = await self.vote_repository.find_by_user_and_product(
                user_id, product_id
            )

            if existing is None:
                if value == VoteValue.NONE:
                    logfire.info(
                        "No vote to retract", product_id=product_id, user_id=user_id
                    )
                    return Vote(
                        user_id=user_id, product_id=product_id, value=VoteValue.NONE
                    )

                saved = await self.vote_repository.add(
                    Vote(user_id=user_id, product_id=product_id, value=value)
                )
                await self.product_service.apply_score_delta(product_id, int(value))
                logfire.info("Vote cast", product_id=product_id, user_id=user_id)
                return saved

            if existing.value == value:
                logfire.info(
                    "Vote unchanged",
                    product_id=product_id,
                    user_id=user_id,
                    value=int(value),
                )
                return existing

            assert existing.id is not None
            updated = await self.vote_repository.update_value(existing.id, value)
            delta = int(value) - int(existing.value)
            await self.product_service.apply_score_delta(product_id, delta)
            logfire.info(
                "Vote changed",
                product_id=product_id,
                user_id=user_id,
                value=int(value),
                delta=delta,
            )
            return updated

    async def cast_creation_vote(self, product: Product) -> Vote:
        """Record the owner's automatic upvote on a newly created product.

        This is the only vote an owner ever holds on their own product.

        Args:
            product: Freshly stored product (score 0)

        Returns:
            The stored vote
        """
        assert product.id is not None
        with logfire.span(
            "vote_service.cast_creation_vote",
            product_id=product.id,
            user_id=product.user_id,
        ):
            vote = await self.vote_repository.add(
                Vote(
                    user_id=product.user_id,
                    product_id=product.id,
                    value=VoteValue.UP,
                )
            )
            await self.product_service.apply_score_delta(
                product.id, int(VoteValue.UP)
            )
            return vote

    async def get_vote(self, user_id: UserId, product_id: ProductId) -> Vote | None:
        """Get a user's vote on a product.

        Args:
            user_id: User ID
            product_id: Product ID

        Returns:
            The vote row if one exists, None otherwise
        """
        with logfire.span(
            "vote_service.get_vote", user_id=user_id, product_id=product_id
        ):
            return await self.vote_repository.find_by_user_and_product(
                user_id, product_id
            )

    async def list_votes_for_user(self, user_id: UserId) -> list[Vote]:
        """List all vote rows held by a user, including retracted ones."""
        return await self.vote_repository.find_by_user(user_id)

    async def delete_votes_for_product(self, product_id: ProductId) -> None:
        """Remove every vote on a product (product deletion)."""
        await self.vote_repository.delete_by_product(product_id)
