"""User aggregate root.

Users are created by the identity collaborator on first login (OAuth callback
or magic-link redemption) and edit their own profile afterwards.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: Optional[UserId] = None  # Assigned by the store on insert
    username: Username
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    is_subscribed_to_newsletter: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
