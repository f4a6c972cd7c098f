"""Newsletter routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from showcase.adapter.error import ProviderError
from showcase.application.usecase.newsletter import (
    SubscribeNewsletterRequest,
    SubscribeNewsletterResponse,
    SubscribeNewsletterUseCase,
)

router = APIRouter(prefix="/newsletter", tags=["newsletter"], route_class=DishkaRoute)


@router.post("/subscribe", response_model=SubscribeNewsletterResponse)
async def subscribe(
    request: SubscribeNewsletterRequest,
    subscribe_use_case: FromDishka[SubscribeNewsletterUseCase],
) -> SubscribeNewsletterResponse:
    """Sign an email address up for the newsletter. No login needed.

    An invalid email is rejected by validation (422). A provider failure
    is a 400 so the form can ask the visitor to try again.
    """
    try:
        return await subscribe_use_case.execute(request)
    except ProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to subscribe at this time. Please try again later.",
        ) from e
