"""Unit tests for CreateProductUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from showcase.application.usecase.product import CreateProductUseCase
from showcase.application.usecase.product.create_product import CreateProductRequest
from showcase.domain.error import NotAuthenticatedError
from showcase.domain.repository import UserRepository, VoteRepository
from showcase.domain.service import ProductService, VoteService
from showcase.domain.value import VoteValue
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(acting_user_id: int | None, **overrides) -> CreateProductRequest:
    data = {
        "acting_user_id": acting_user_id,
        "title": "Walnut Stool",
        "description": "Three legs, no nails",
        "company_name": "North Joinery",
        "link": "https://example.com/stool",
        "image_url": "https://example.com/stool.jpg",
        "country": "Norway",
        "material": ["Walnut", "Linseed Oil"],
        "collection": "Furniture",
    }
    data.update(overrides)
    return CreateProductRequest(**data)


class TestCreateProductUseCase:
    """Tests for CreateProductUseCase."""

    @pytest.mark.asyncio
    async def test_new_product_scores_one(self, unit_env):
        """Creator's automatic upvote should give the product score 1."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        vote_repo = await unit_env.get(VoteRepository)
        product_service = await unit_env.get(ProductService)
        vote_service = await unit_env.get(VoteService)
        user = await make_user(user_repo)
        use_case = CreateProductUseCase(product_service, vote_service)

        # Act
        response = await use_case.execute(_request(user.id))

        # Assert
        assert response.product.score == 1
        assert response.product.user_id == user.id
        assert response.product.material == ["Walnut", "Linseed Oil"]

        vote = await vote_repo.find_by_user_and_product(
            user.id, response.product.product_id
        )
        assert vote is not None
        assert vote.value == VoteValue.UP

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        """Should require a session."""
        # Arrange
        use_case = await unit_env.get(CreateProductUseCase)

        # Act / Assert
        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(_request(None))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": "   "},
            {"description": "  "},
            {"material": []},
            {"link": "ftp://example.com/stool"},
            {"image_url": "not a url"},
        ],
        ids=[
            "blank-title",
            "blank-description",
            "no-material",
            "bad-link",
            "bad-image",
        ],
    )
    def test_invalid_request_rejected(self, overrides):
        """Malformed submissions should fail request validation."""
        with pytest.raises(PydanticValidationError):
            _request(1, **overrides)

    def test_description_required(self):
        """A submission without a description should be rejected."""
        data = _request(1).model_dump()
        del data["description"]

        with pytest.raises(PydanticValidationError):
            CreateProductRequest(**data)
