"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from showcase.domain.model.user import User
from showcase.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The username to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User without an ID

        Returns:
            The stored user with its assigned ID
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist changes to an existing user.

        Args:
            user: User with an ID

        Returns:
            The updated user
        """
        pass
