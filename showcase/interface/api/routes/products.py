"""Product routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, ConfigDict, Field

from showcase.application.usecase.product import (
    CreateProductRequest,
    CreateProductResponse,
    CreateProductUseCase,
    DeleteProductRequest,
    DeleteProductResponse,
    DeleteProductUseCase,
    GetProductRequest,
    GetProductResponse,
    GetProductUseCase,
    ListProductsRequest,
    ListProductsResponse,
    ListProductsUseCase,
    UpdateProductRequest,
    UpdateProductResponse,
    UpdateProductUseCase,
)
from showcase.domain.error import DomainError
from showcase.domain.repository import ProductSortOrder
from showcase.domain.service import JWTService
from showcase.interface.error import to_http_exception

router = APIRouter(prefix="/products", tags=["products"], route_class=DishkaRoute)


class CreateProductAPIRequest(BaseModel):
    """API request for submitting a product."""

    title: str
    description: str
    company_name: str
    link: str
    image_url: str
    country: str
    material: list[str]
    collection: str


class UpdateProductAPIRequest(BaseModel):
    """API request for editing a product.

    Unknown fields are rejected, so score and owner cannot be sent.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    company_name: str | None = None
    link: str | None = None
    image_url: str | None = None
    country: str | None = None
    material: list[str] | None = Field(default=None)
    collection: str | None = None


@router.get("", response_model=ListProductsResponse)
async def list_products(
    list_products_use_case: FromDishka[ListProductsUseCase],
    sort: ProductSortOrder = ProductSortOrder.NEWEST,
) -> ListProductsResponse:
    """List products, featured first.

    Args:
        list_products_use_case: List products use case from DI
        sort: newest (default) or top

    Returns:
        Product list
    """
    return await list_products_use_case.execute(ListProductsRequest(sort=sort))


@router.post(
    "", response_model=CreateProductResponse, status_code=status.HTTP_201_CREATED
)
async def create_product(
    request: CreateProductAPIRequest,
    create_product_use_case: FromDishka[CreateProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateProductResponse:
    """Submit a product. Requires authentication.

    Args:
        request: Product data
        create_product_use_case: Create product use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created product, score 1
    """
    try:
        use_case_request = CreateProductRequest(
            acting_user_id=jwt_service.get_user_id_from_token(auth_token),
            **request.model_dump(),
        )
        return await create_product_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{product_id}", response_model=GetProductResponse)
async def get_product(
    product_id: int,
    get_product_use_case: FromDishka[GetProductUseCase],
) -> GetProductResponse:
    """Get a product by ID.

    Args:
        product_id: Product ID
        get_product_use_case: Get product use case from DI

    Returns:
        Product details
    """
    try:
        return await get_product_use_case.execute(
            GetProductRequest(product_id=product_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.patch("/{product_id}", response_model=UpdateProductResponse)
async def update_product(
    product_id: int,
    request: UpdateProductAPIRequest,
    update_product_use_case: FromDishka[UpdateProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateProductResponse:
    """Edit a product's details. Only the owner can edit.

    Args:
        product_id: Product ID
        request: Fields to change
        update_product_use_case: Update product use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated product
    """
    try:
        use_case_request = UpdateProductRequest(
            acting_user_id=jwt_service.get_user_id_from_token(auth_token),
            product_id=product_id,
            **request.model_dump(exclude_unset=True),
        )
        return await update_product_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{product_id}", response_model=DeleteProductResponse)
async def delete_product(
    product_id: int,
    delete_product_use_case: FromDishka[DeleteProductUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteProductResponse:
    """Delete a product with its votes and comments. Only the owner can delete.

    Args:
        product_id: Product ID
        delete_product_use_case: Delete product use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Deletion confirmation
    """
    try:
        return await delete_product_use_case.execute(
            DeleteProductRequest(
                acting_user_id=jwt_service.get_user_id_from_token(auth_token),
                product_id=product_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
