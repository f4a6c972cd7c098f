"""Unit tests for ProductService."""

import pytest

from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.model.product import Product
from showcase.domain.repository import ProductRepository, UserRepository
from showcase.domain.repository.product import ProductSortOrder
from showcase.domain.service import ProductService
from showcase.domain.value import ProductId
from tests.conftest import make_product, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateProduct:
    """Tests for ProductService.create_product."""

    @pytest.mark.asyncio
    async def test_stores_with_zero_score(self, unit_env):
        """Score supplied by the caller should be ignored."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_service = await unit_env.get(ProductService)
        user = await make_user(user_repo)

        product = Product(
            title="Linen Throw",
            company_name="Loom & Co",
            link="https://example.com/throw",
            image_url="https://example.com/throw.jpg",
            country="Portugal",
            material=["Linen"],
            collection="Textiles",
            user_id=user.id,
            score=50,
        )

        # Act
        saved = await product_service.create_product(product)

        # Assert
        assert saved.id is not None
        assert saved.score == 0


class TestUpdateDetails:
    """Tests for ProductService.update_details."""

    @pytest.mark.asyncio
    async def test_update_descriptive_fields(self, unit_env):
        """Should apply descriptive changes and dedupe materials."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_repo = await unit_env.get(ProductRepository)
        product_service = await unit_env.get(ProductService)
        user = await make_user(user_repo)
        product = await make_product(product_repo, user.id)

        # Act
        updated = await product_service.update_details(
            product, {"title": "Oak Table", "material": ["Oak", "Brass", "Oak"]}
        )

        # Assert
        assert updated.title == "Oak Table"
        assert updated.material == ["Oak", "Brass"]
        stored = await product_repo.find_by_id(product.id)
        assert stored.title == "Oak Table"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value", [("score", 100), ("user_id", 2), ("featured", True)]
    )
    async def test_protected_fields_rejected(self, unit_env, field, value):
        """Score, owner and featured cannot be written through an edit."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_repo = await unit_env.get(ProductRepository)
        product_service = await unit_env.get(ProductService)
        user = await make_user(user_repo)
        product = await make_product(product_repo, user.id)

        # Act / Assert
        with pytest.raises(ValidationError):
            await product_service.update_details(product, {field: value})

        stored = await product_repo.find_by_id(product.id)
        assert stored.score == 0
        assert stored.user_id == user.id
        assert stored.featured is False


class TestSetFeatured:
    """Tests for ProductService.set_featured."""

    @pytest.mark.asyncio
    async def test_promotes_and_demotes(self, unit_env):
        """Should toggle the flag without touching the score."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_repo = await unit_env.get(ProductRepository)
        product_service = await unit_env.get(ProductService)
        user = await make_user(user_repo)
        product = await make_product(product_repo, user.id)

        # Act
        promoted = await product_service.set_featured(product.id, True)
        demoted = await product_service.set_featured(product.id, False)

        # Assert
        assert promoted.featured is True
        assert demoted.featured is False
        assert demoted.score == product.score

    @pytest.mark.asyncio
    async def test_missing_product(self, unit_env):
        """Should raise NotFoundError for an unknown product."""
        product_service = await unit_env.get(ProductService)

        with pytest.raises(NotFoundError):
            await product_service.set_featured(ProductId(999), True)


class TestListProducts:
    """Tests for ProductService.list_products."""

    @pytest.mark.asyncio
    async def test_featured_first_then_newest(self, unit_env):
        """Default listing puts featured products first."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_repo = await unit_env.get(ProductRepository)
        product_service = await unit_env.get(ProductService)
        user = await make_user(user_repo)
        old = await make_product(product_repo, user.id, "Old", minutes_ago=30)
        featured = await make_product(
            product_repo, user.id, "Featured", featured=True, minutes_ago=60
        )
        new = await make_product(product_repo, user.id, "New", minutes_ago=0)

        # Act
        products = await product_service.list_products()

        # Assert
        assert [p.id for p in products] == [featured.id, new.id, old.id]

    @pytest.mark.asyncio
    async def test_top_sort_orders_by_score(self, unit_env):
        """Top listing orders non-featured products by score."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        product_repo = await unit_env.get(ProductRepository)
        product_service = await unit_env.get(ProductService)
        user = await make_user(user_repo)
        low = await make_product(product_repo, user.id, "Low", minutes_ago=0)
        high = await make_product(product_repo, user.id, "High", minutes_ago=10)
        await product_service.apply_score_delta(high.id, 3)

        # Act
        products = await product_service.list_products(ProductSortOrder.TOP)

        # Assert
        assert [p.id for p in products] == [high.id, low.id]
