"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import UserService
from showcase.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: int


class GetUserProfileResponse(BaseModel):
    """Public user profile."""

    user_id: int
    username: str
    avatar_url: str | None
    created_at: datetime


class GetUserProfileUseCase(BaseUseCase):
    """Use case for viewing a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        assert user.id is not None

        return GetUserProfileResponse(
            user_id=user.id,
            username=user.username.root,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )
