"""User routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from showcase.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from showcase.application.usecase.product import (
    ListProductsRequest,
    ListProductsResponse,
    ListProductsUseCase,
)
from showcase.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from showcase.domain.error import DomainError
from showcase.domain.service import JWTService
from showcase.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    username: str | None = None
    is_subscribed_to_newsletter: bool | None = None


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update the caller's username or newsletter subscription.

    Args:
        request: Fields to change
        update_profile_use_case: Update profile use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated profile
    """
    try:
        result = await update_profile_use_case.execute(
            UpdateUserProfileRequest(
                acting_user_id=jwt_service.get_user_id_from_token(auth_token),
                username=request.username,
                is_subscribed_to_newsletter=request.is_subscribed_to_newsletter,
            )
        )
        logfire.info("Profile updated via API", user_id=result.user_id)
        return result
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: int,
    get_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile."""
    try:
        return await get_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{user_id}/products", response_model=ListProductsResponse)
async def get_user_products(
    user_id: int,
    list_products_use_case: FromDishka[ListProductsUseCase],
) -> ListProductsResponse:
    """List products submitted by a user, newest first."""
    return await list_products_use_case.execute(ListProductsRequest(user_id=user_id))


@router.get("/{user_id}/comments", response_model=GetCommentsResponse)
async def get_user_comments(
    user_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List comments written by a user, newest first."""
    return await get_comments_use_case.execute(GetCommentsRequest(user_id=user_id))
