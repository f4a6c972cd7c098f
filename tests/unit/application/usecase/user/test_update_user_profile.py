"""Unit tests for user profile use cases."""

import pytest

from showcase.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from showcase.application.usecase.user.get_user_profile import GetUserProfileRequest
from showcase.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from showcase.domain.error import NotAuthenticatedError, NotFoundError
from showcase.domain.repository import UserRepository
from showcase.domain.service import NewsletterClient, UserService
from showcase.domain.value import Username
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_username(self, unit_env):
        """Should update the username."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user_service = await unit_env.get(UserService)
        user = await make_user(user_repo, "maker")
        use_case = UpdateUserProfileUseCase(user_service)

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(acting_user_id=user.id, username="craftsperson")
        )

        # Assert
        assert response.user_id == user.id
        assert response.username == "craftsperson"

        # Verify persistence
        stored = await user_repo.find_by_id(user.id)
        assert stored.username == Username("craftsperson")

    @pytest.mark.asyncio
    async def test_subscribe_to_newsletter(self, unit_env):
        """Should set the flag and register the email."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        newsletter = await unit_env.get(NewsletterClient)
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user = await make_user(user_repo, email="reader@example.com")

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(
                acting_user_id=user.id, is_subscribed_to_newsletter=True
            )
        )

        # Assert
        assert response.is_subscribed_to_newsletter is True
        assert newsletter.subscribed == ["reader@example.com"]

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        """Should require a session."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(UpdateUserProfileRequest(username="nobody"))


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_get_profile(self, unit_env):
        """Should return the public profile."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetUserProfileUseCase)
        user = await make_user(user_repo, "maker", email="private@example.com")

        # Act
        response = await use_case.execute(GetUserProfileRequest(user_id=user.id))

        # Assert
        assert response.username == "maker"
        assert not hasattr(response, "email")

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        """Should raise NotFoundError for an unknown user."""
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id=42))
