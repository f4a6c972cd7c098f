"""Public newsletter signup use case."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import UserService


class SubscribeNewsletterRequest(BaseModel):
    """Signup form data. No session is needed."""

    email: EmailStr
    first_name: str | None = Field(default=None, max_length=100)
    source: str = Field(default="website", max_length=100)

    @field_validator("first_name")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat a blank first name as absent."""
        if v is None:
            return v
        return v.strip() or None


class SubscribeNewsletterResponse(BaseModel):
    """Signup confirmation."""

    message: str


class SubscribeNewsletterUseCase(BaseUseCase):
    """Use case for the public newsletter signup form."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(
        self, request: SubscribeNewsletterRequest
    ) -> SubscribeNewsletterResponse:
        """Send the address to the newsletter provider.

        Raises:
            ProviderError: If the provider is unconfigured or rejects the address
        """
        await self.user_service.subscribe_email(
            request.email, first_name=request.first_name, source=request.source
        )
        return SubscribeNewsletterResponse(
            message="Thank you for subscribing to our newsletter!"
        )
