"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from showcase.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    VoteItem,
)
from showcase.domain.error import DomainError
from showcase.domain.service import JWTService
from showcase.interface.error import to_http_exception

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    product_id: int
    value: int  # 1 = upvote, 0 = retract


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Set the caller's vote on a product.

    Requires authentication. Owners cannot vote on their own products.

    Args:
        request: Product and desired vote value
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Resulting vote and the product's new score
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                acting_user_id=jwt_service.get_user_id_from_token(auth_token),
                product_id=request.product_id,
                value=request.value,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("", response_model=ListVotesResponse)
async def list_votes(
    list_votes_use_case: FromDishka[ListVotesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListVotesResponse:
    """List the caller's votes (empty when anonymous)."""
    return await list_votes_use_case.execute(
        ListVotesRequest(acting_user_id=jwt_service.get_user_id_from_token(auth_token))
    )


@router.get("/{product_id}", response_model=VoteItem | None)
async def get_vote(
    product_id: int,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteItem | None:
    """Get the caller's vote on a product (null when anonymous or not voted)."""
    response = await get_vote_use_case.execute(
        GetVoteRequest(
            acting_user_id=jwt_service.get_user_id_from_token(auth_token),
            product_id=product_id,
        )
    )
    return response.vote
