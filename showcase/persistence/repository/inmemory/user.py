"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from showcase.domain.model.user import User
from showcase.domain.repository.user import UserRepository
from showcase.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a new user with the next ID."""
        stored = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[stored.id] = stored
        return stored

    async def update(self, user: User) -> User:
        """Replace a stored user."""
        assert user.id is not None
        self._users[user.id] = user
        return user
