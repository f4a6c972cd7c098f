"""Product use cases."""

from .create_product import (
    CreateProductRequest,
    CreateProductResponse,
    CreateProductUseCase,
)
from .delete_product import (
    DeleteProductRequest,
    DeleteProductResponse,
    DeleteProductUseCase,
)
from .get_product import (
    GetProductRequest,
    GetProductResponse,
    GetProductUseCase,
    ProductItem,
)
from .list_products import ListProductsRequest, ListProductsResponse, ListProductsUseCase
from .update_product import (
    UpdateProductRequest,
    UpdateProductResponse,
    UpdateProductUseCase,
)

__all__ = [
    "CreateProductRequest",
    "CreateProductResponse",
    "CreateProductUseCase",
    "DeleteProductRequest",
    "DeleteProductResponse",
    "DeleteProductUseCase",
    "GetProductRequest",
    "GetProductResponse",
    "GetProductUseCase",
    "ListProductsRequest",
    "ListProductsResponse",
    "ListProductsUseCase",
    "ProductItem",
    "UpdateProductRequest",
    "UpdateProductResponse",
    "UpdateProductUseCase",
]
