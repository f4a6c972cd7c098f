"""Unit tests for vote use cases."""

import pytest

from showcase.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteUseCase,
    ListVotesUseCase,
)
from showcase.application.usecase.vote.cast_vote import CastVoteRequest
from showcase.application.usecase.vote.get_vote import GetVoteRequest
from showcase.application.usecase.vote.list_votes import ListVotesRequest
from showcase.domain.error import (
    NotAuthenticatedError,
    SelfVoteError,
    ValidationError,
)
from showcase.domain.repository import ProductRepository, UserRepository
from showcase.domain.service import VoteService
from tests.conftest import make_product, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _setup(unit_env):
    user_repo = await unit_env.get(UserRepository)
    product_repo = await unit_env.get(ProductRepository)
    vote_service = await unit_env.get(VoteService)

    owner = await make_user(user_repo, "owner")
    voter = await make_user(user_repo, "voter")
    product = await make_product(product_repo, owner.id)
    await vote_service.cast_creation_vote(product)
    return owner, voter, product


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_reports_new_score(self, unit_env):
        """Should return the vote and the product's updated score."""
        # Arrange
        _, voter, product = await _setup(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        response = await use_case.execute(
            CastVoteRequest(acting_user_id=voter.id, product_id=product.id, value=1)
        )

        # Assert
        assert response.vote_id is not None
        assert response.value == 1
        assert response.score == 2

    @pytest.mark.asyncio
    async def test_retract_without_vote_has_no_id(self, unit_env):
        """Retracting nothing should report value 0 and no vote ID."""
        # Arrange
        _, voter, product = await _setup(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        response = await use_case.execute(
            CastVoteRequest(acting_user_id=voter.id, product_id=product.id, value=0)
        )

        # Assert
        assert response.vote_id is None
        assert response.value == 0
        assert response.score == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [-1, 2, 5])
    async def test_out_of_range_value_rejected(self, unit_env, value):
        """Only 0 and 1 are valid vote values."""
        # Arrange
        _, voter, product = await _setup(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        # Act / Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CastVoteRequest(
                    acting_user_id=voter.id, product_id=product.id, value=value
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        """Should require a session."""
        _, _, product = await _setup(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(CastVoteRequest(product_id=product.id, value=1))

    @pytest.mark.asyncio
    async def test_owner_rejected(self, unit_env):
        """Owner cannot vote on their own product."""
        owner, _, product = await _setup(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(SelfVoteError):
            await use_case.execute(
                CastVoteRequest(acting_user_id=owner.id, product_id=product.id, value=0)
            )


class TestReadVotesUseCases:
    """Tests for GetVoteUseCase and ListVotesUseCase."""

    @pytest.mark.asyncio
    async def test_get_and_list_votes(self, unit_env):
        """Should return the caller's vote rows."""
        # Arrange
        _, voter, product = await _setup(unit_env)
        cast = await unit_env.get(CastVoteUseCase)
        get_vote = await unit_env.get(GetVoteUseCase)
        list_votes = await unit_env.get(ListVotesUseCase)
        await cast.execute(
            CastVoteRequest(acting_user_id=voter.id, product_id=product.id, value=1)
        )

        # Act
        single = await get_vote.execute(
            GetVoteRequest(acting_user_id=voter.id, product_id=product.id)
        )
        listed = await list_votes.execute(ListVotesRequest(acting_user_id=voter.id))

        # Assert
        assert single.vote is not None
        assert single.vote.value == 1
        assert [v.product_id for v in listed.votes] == [product.id]

    @pytest.mark.asyncio
    async def test_anonymous_reads_are_empty(self, unit_env):
        """Anonymous callers have no votes."""
        # Arrange
        _, _, product = await _setup(unit_env)
        get_vote = await unit_env.get(GetVoteUseCase)
        list_votes = await unit_env.get(ListVotesUseCase)

        # Act
        single = await get_vote.execute(GetVoteRequest(product_id=product.id))
        listed = await list_votes.execute(ListVotesRequest())

        # Assert
        assert single.vote is None
        assert listed.votes == []
