"""Create product use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.model import Product
from showcase.domain.service import ProductService, VoteService

from .get_product import ProductItem


def validate_http_url(value: str) -> str:
    """Require an absolute http(s) URL."""
    value = value.strip()
    scheme, _, rest = value.partition("://")
    if scheme not in ("http", "https") or not rest:
        raise ValueError("Must be an http(s) URL")
    return value


class CreateProductRequest(BaseModel):
    """Create product request."""

    acting_user_id: int | None = None  # From session, None when anonymous
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    company_name: str = Field(min_length=1, max_length=300)
    link: str
    image_url: str
    country: str = Field(min_length=1)
    material: list[str] = Field(min_length=1)
    collection: str = Field(min_length=1)

    @field_validator("title", "description", "company_name", "country", "collection")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Reject whitespace-only values."""
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be empty")
        return v

    @field_validator("link", "image_url")
    @classmethod
    def check_url(cls, v: str) -> str:
        """Validate URL fields."""
        return validate_http_url(v)

    @field_validator("material")
    @classmethod
    def check_material(cls, v: list[str]) -> list[str]:
        """Require at least one non-blank material."""
        cleaned = [m.strip() for m in v if m.strip()]
        if not cleaned:
            raise ValueError("At least one material is required")
        return cleaned


class CreateProductResponse(BaseModel):
    """Create product response."""

    product: ProductItem


class CreateProductUseCase(BaseUseCase):
    """Use case for submitting a product.

    The submitter's automatic upvote is recorded in the vote ledger, so a
    new product starts with a score of 1.
    """

    def __init__(
        self,
        product_service: ProductService,
        vote_service: VoteService,
    ) -> None:
        """Initialize create product use case.

        Args:
            product_service: Product domain service
            vote_service: Vote domain service
        """
        self.product_service = product_service
        self.vote_service = vote_service

    async def execute(self, request: CreateProductRequest) -> CreateProductResponse:
        """Execute create product flow.

        Steps:
        1. Require a session
        2. Store the product with score 0
        3. Cast the owner's creation vote (score becomes 1)

        Raises:
            NotAuthenticatedError: If anonymous
        """
        user_id = require_user(request.acting_user_id, "submit a product")

        with logfire.span("create_product", user_id=user_id, title=request.title):
            product = await self.product_service.create_product(
                Product(
                    title=request.title,
                    description=request.description,
                    company_name=request.company_name,
                    link=request.link,
                    image_url=request.image_url,
                    country=request.country,
                    material=request.material,
                    collection=request.collection,
                    user_id=user_id,
                )
            )
            await self.vote_service.cast_creation_vote(product)

            assert product.id is not None
            stored = await self.product_service.get_product_by_id(product.id)
            assert stored is not None
            return CreateProductResponse(product=ProductItem.from_product(stored))
