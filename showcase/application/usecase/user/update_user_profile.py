"""Update user profile use case."""

from pydantic import BaseModel, Field

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.service import UserService


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    acting_user_id: int | None = None  # From session
    username: str | None = Field(default=None, max_length=50)
    is_subscribed_to_newsletter: bool | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: int
    username: str
    email: str | None
    avatar_url: str | None
    is_subscribed_to_newsletter: bool


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for editing the acting user's own profile.

    Users can change their username and newsletter subscription.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the session user no longer exists
            ValidationError: If no fields are given or the username is blank
            UsernameTakenError: If the username belongs to someone else
        """
        user_id = require_user(request.acting_user_id, "update your profile")

        user = await self.user_service.get_by_id(user_id)
        updated = await self.user_service.update_profile(
            user,
            username=request.username,
            is_subscribed_to_newsletter=request.is_subscribed_to_newsletter,
        )
        assert updated.id is not None

        return UpdateUserProfileResponse(
            user_id=updated.id,
            username=updated.username.root,
            email=updated.email,
            avatar_url=updated.avatar_url,
            is_subscribed_to_newsletter=updated.is_subscribed_to_newsletter,
        )
