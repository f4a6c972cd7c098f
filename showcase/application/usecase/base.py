"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from showcase.domain.error import NotAuthenticatedError
from showcase.domain.value import UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_user(acting_user_id: int | None, action: str) -> UserId:
    """Resolve the acting user for a write, rejecting anonymous callers.

    Args:
        acting_user_id: Session user ID, None when anonymous
        action: What the caller tried to do, for the error message

    Returns:
        Typed user ID

    Raises:
        NotAuthenticatedError: If there is no session
    """
    if acting_user_id is None:
        raise NotAuthenticatedError(action)
    return UserId(acting_user_id)
