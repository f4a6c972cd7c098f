"""User domain service."""

import logfire

from showcase.domain.error import NotFoundError, UsernameTakenError, ValidationError
from showcase.domain.model.user import User
from showcase.domain.repository import UserRepository
from showcase.domain.value import UserId, Username

from .base import Service


class NewsletterClient:
    """Newsletter mailing-list interface."""

    async def subscribe(
        self, email: str, first_name: str | None = None, source: str = "profile"
    ) -> None:
        """Add an email address to the mailing list.

        Args:
            email: Address to subscribe
            first_name: Subscriber's first name, if given
            source: Where the signup came from (sent as utm_source)

        Raises:
            ProviderError: If the newsletter provider rejects the request
        """
        raise NotImplementedError


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        newsletter_client: NewsletterClient,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            newsletter_client: Newsletter provider client
        """
        self.user_repository = user_repository
        self.newsletter_client = newsletter_client

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username.root):
            return await self.user_repository.find_by_username(username)

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email address."""
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email)

    async def create_user(
        self,
        username: Username,
        email: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Create a user on first login.

        Called by the identity collaborator after a successful OAuth callback
        or magic-link redemption.

        Args:
            username: Desired username
            email: Email address, if the provider shared one
            avatar_url: Avatar URL, if the provider shared one

        Returns:
            Stored user

        Raises:
            UsernameTakenError: If the username is in use
        """
        with logfire.span("user_service.create_user", username=username.root):
            if await self.user_repository.find_by_username(username):
                raise UsernameTakenError(username.root)

            saved = await self.user_repository.add(
                User(username=username, email=email, avatar_url=avatar_url)
            )
            logfire.info("User created", user_id=saved.id, username=saved.username.root)
            return saved

    async def update_profile(
        self,
        user: User,
        username: str | None = None,
        is_subscribed_to_newsletter: bool | None = None,
    ) -> User:
        """Apply profile changes.

        Subscribing a user with an email also registers them with the
        newsletter provider. A provider failure is logged and the profile
        update still goes through.

        Args:
            user: Current user
            username: New username, if changing
            is_subscribed_to_newsletter: New subscription flag, if changing

        Returns:
            Updated user

        Raises:
            ValidationError: If no changes are given or the username is blank
            UsernameTakenError: If another user holds the username
        """
        with logfire.span("user_service.update_profile", user_id=user.id):
            if username is None and is_subscribed_to_newsletter is None:
                raise ValidationError("No profile fields to update")

            changes: dict = {}

            if username is not None:
                if not username.strip():
                    raise ValidationError("Username cannot be empty")
                new_username = Username(username)
                if new_username != user.username:
                    holder = await self.user_repository.find_by_username(new_username)
                    if holder and holder.id != user.id:
                        logfire.warn(
                            "Username already taken",
                            user_id=user.id,
                            username=new_username.root,
                        )
                        raise UsernameTakenError(new_username.root)
                changes["username"] = new_username

            if is_subscribed_to_newsletter is not None:
                changes["is_subscribed_to_newsletter"] = is_subscribed_to_newsletter
                if (
                    is_subscribed_to_newsletter
                    and not user.is_subscribed_to_newsletter
                    and user.email
                ):
                    await self._subscribe(user)

            saved = await self.user_repository.update(user.model_copy(update=changes))
            logfire.info("Profile updated", user_id=saved.id, fields=sorted(changes))
            return saved

    async def subscribe_email(
        self, email: str, first_name: str | None = None, source: str = "website"
    ) -> None:
        """Subscribe an address that need not belong to a user.

        Raises:
            ProviderError: If the newsletter provider rejects the request
        """
        with logfire.span("user_service.subscribe_email", source=source):
            await self.newsletter_client.subscribe(
                email, first_name=first_name, source=source
            )
            logfire.info("Newsletter signup sent", source=source)

    async def _subscribe(self, user: User) -> None:
        assert user.email is not None
        try:
            await self.newsletter_client.subscribe(user.email)
            logfire.info("Newsletter subscription sent", user_id=user.id)
        except Exception as e:
            logfire.error(
                "Newsletter subscription failed", user_id=user.id, error=str(e)
            )
