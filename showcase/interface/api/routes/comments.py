"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from showcase.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from showcase.domain.error import DomainError
from showcase.domain.service import JWTService
from showcase.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(max_length=10000)
    parent_id: int | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(max_length=10000)


@router.get("/products/{product_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    product_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get a product's comments as a flat list, oldest first.

    Args:
        product_id: Product ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat comment list
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(product_id=product_id)
    )


@router.get(
    "/products/{product_id}/comments/tree", response_model=GetCommentTreeResponse
)
async def get_comment_tree(
    product_id: int,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """Get a product's discussion as nested threads.

    Replies deeper than the configured depth are not included.
    """
    return await get_comment_tree_use_case.execute(
        GetCommentTreeRequest(product_id=product_id)
    )


@router.post(
    "/products/{product_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    product_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a product or reply to a comment.

    Requires authentication.

    Args:
        product_id: Product ID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                acting_user_id=jwt_service.get_user_id_from_token(auth_token),
                product_id=product_id,
                content=request.content,
                parent_id=request.parent_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment. Only the author can edit."""
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                acting_user_id=jwt_service.get_user_id_from_token(auth_token),
                comment_id=comment_id,
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment. Only the author can delete, and only without replies."""
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                acting_user_id=jwt_service.get_user_id_from_token(auth_token),
                comment_id=comment_id,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
