"""Beehiiv newsletter client.

Subscribes users to the publication's mailing list when they opt in from
their profile.
"""

from typing import Any

import httpx
import logfire

from showcase.adapter.error import ProviderError
from showcase.config import NewsletterSettings
from showcase.domain.service.user_service import NewsletterClient

ALREADY_SUBSCRIBED_MARKERS = ("already exists", "already subscribed")


class NewsletterError(ProviderError):
    """Beehiiv rejected or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__("beehiiv", message, status_code)


def _is_already_subscribed(payload: Any) -> bool:
    """Check a Beehiiv 400 body for an "already subscribed" message.

    The errors field comes back as a list of strings, a list of objects with
    a message, or an object mapping fields to messages depending on the
    API version.
    """
    if not isinstance(payload, dict):
        return False

    errors = payload.get("errors")
    if isinstance(errors, dict):
        messages: list[Any] = []
        for value in errors.values():
            messages.extend(value if isinstance(value, list) else [value])
    elif isinstance(errors, list):
        messages = [e.get("message") if isinstance(e, dict) else e for e in errors]
    else:
        return False

    return any(
        isinstance(m, str) and any(marker in m for marker in ALREADY_SUBSCRIBED_MARKERS)
        for m in messages
    )


class BeehiivNewsletterClient(NewsletterClient):
    """Newsletter client backed by the Beehiiv v2 API."""

    def __init__(self, settings: NewsletterSettings) -> None:
        """Initialize Beehiiv client.

        Args:
            settings: Newsletter settings
        """
        self.settings = settings

    @property
    def is_configured(self) -> bool:
        """Whether both the API key and publication ID are set."""
        return bool(self.settings.api_key and self.settings.publication_id)

    @property
    def subscriptions_url(self) -> str:
        """Endpoint for creating subscriptions."""
        return (
            f"{self.settings.api_url}/publications/"
            f"{self.settings.publication_id}/subscriptions"
        )

    async def subscribe(
        self, email: str, first_name: str | None = None, source: str = "profile"
    ) -> None:
        """Subscribe an email to the publication.

        An address that is already on the list counts as success.

        Args:
            email: Address to subscribe
            first_name: Stored as the first_name custom field when given
            source: Sent as utm_source

        Raises:
            NewsletterError: If the client is not configured or Beehiiv rejects
                the request
        """
        if not self.is_configured:
            logfire.warn("Newsletter not configured, skipping subscription")
            raise NewsletterError("Newsletter service is not configured")

        body = {
            "email": email,
            "referring_site": self.settings.referring_site,
            "send_welcome_email": True,
            "custom_fields": (
                [{"name": "first_name", "value": first_name}] if first_name else []
            ),
            "utm_source": source,
            "utm_medium": "profile" if source == "profile" else "subscribe_form",
            "utm_campaign": self.settings.referring_site,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.subscriptions_url,
                    json=body,
                    headers={
                        "Accept": "application/json",
                        "Authorization": f"Bearer {self.settings.api_key}",
                    },
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Beehiiv HTTP error", error=str(e))
            raise NewsletterError(f"HTTP error subscribing to newsletter: {e}")

        if response.status_code in (200, 201):
            logfire.info("Newsletter subscription created")
            return

        if response.status_code == 400:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if _is_already_subscribed(payload):
                logfire.info("Email already subscribed to newsletter")
                return

        logfire.error(
            "Beehiiv subscription failed",
            status_code=response.status_code,
            error=response.text,
        )
        raise NewsletterError(
            f"Subscription failed: {response.status_code}", response.status_code
        )


class MockNewsletterClient(NewsletterClient):
    """Mock newsletter client for testing.

    Records subscribed addresses instead of calling Beehiiv. Set
    ``fail`` to simulate a provider outage.
    """

    def __init__(self, fail: bool = False) -> None:
        self.subscribed: list[str] = []
        self.sources: list[str] = []
        self.fail = fail

    async def subscribe(
        self, email: str, first_name: str | None = None, source: str = "profile"
    ) -> None:
        """Record the address, or raise when simulating a failure."""
        if self.fail:
            raise NewsletterError("Mock newsletter failure")
        self.subscribed.append(email)
        self.sources.append(source)
