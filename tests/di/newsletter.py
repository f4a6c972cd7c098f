"""Mock newsletter providers for testing."""

from dishka import Scope, provide

from showcase.adapter.newsletter.client import MockNewsletterClient
from showcase.domain.service import NewsletterClient
from showcase.util.di.infrastructure.newsletter import NewsletterProvider


class MockNewsletterProvider(NewsletterProvider):
    """Mock newsletter provider recording subscriptions in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_newsletter_client(self) -> NewsletterClient:
        """Provide mock newsletter client."""
        return MockNewsletterClient()
