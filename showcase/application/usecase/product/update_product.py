"""Update product use case."""

from pydantic import BaseModel, Field, field_validator

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.error import NotAuthorizedError, NotFoundError
from showcase.domain.service import ProductService
from showcase.domain.value import ProductId

from .create_product import validate_http_url
from .get_product import ProductItem


class UpdateProductRequest(BaseModel):
    """Update product request.

    Only descriptive fields are editable. Unset fields are left unchanged.
    """

    acting_user_id: int | None = None
    product_id: int
    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, min_length=1, max_length=10000)
    company_name: str | None = Field(default=None, min_length=1, max_length=300)
    link: str | None = None
    image_url: str | None = None
    country: str | None = Field(default=None, min_length=1)
    material: list[str] | None = Field(default=None, min_length=1)
    collection: str | None = Field(default=None, min_length=1)

    @field_validator("title", "description", "company_name", "country", "collection")
    @classmethod
    def strip_required(cls, v: str | None) -> str | None:
        """Reject whitespace-only values."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be empty")
        return v

    @field_validator("link", "image_url")
    @classmethod
    def check_url(cls, v: str | None) -> str | None:
        """Validate URL fields when present."""
        return validate_http_url(v) if v is not None else v

    def changes(self) -> dict:
        """Fields the caller set, excluding routing information."""
        return self.model_dump(
            exclude_unset=True, exclude={"acting_user_id", "product_id"}
        )


class UpdateProductResponse(BaseModel):
    """Update product response."""

    product: ProductItem


class UpdateProductUseCase(BaseUseCase):
    """Use case for editing a product's details."""

    def __init__(self, product_service: ProductService) -> None:
        """Initialize update product use case.

        Args:
            product_service: Product domain service
        """
        self.product_service = product_service

    async def execute(self, request: UpdateProductRequest) -> UpdateProductResponse:
        """Execute update product flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the product does not exist
            NotAuthorizedError: If the user does not own the product
        """
        user_id = require_user(request.acting_user_id, "edit a product")
        product_id = ProductId(request.product_id)

        product = await self.product_service.get_product_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", str(request.product_id))

        if not product.is_owned_by(user_id):
            raise NotAuthorizedError("product", str(product_id), str(user_id))

        updated = await self.product_service.update_details(product, request.changes())
        return UpdateProductResponse(product=ProductItem.from_product(updated))
