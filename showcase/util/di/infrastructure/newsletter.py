"""Newsletter infrastructure providers."""

from dishka import Scope, provide

from showcase.adapter.newsletter.client import BeehiivNewsletterClient
from showcase.config import Settings
from showcase.domain.service import NewsletterClient
from showcase.util.di.base import ProviderBase


class NewsletterProvider(ProviderBase):
    """Newsletter component base."""

    __mock_component__ = "newsletter"


class ProdNewsletterProvider(NewsletterProvider):
    """Production newsletter provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_newsletter_client(self, settings: Settings) -> NewsletterClient:
        """Provide Beehiiv newsletter client.

        An unconfigured client is still provided; subscribe() then fails and
        the failure is logged by the user service.
        """
        return BeehiivNewsletterClient(settings.newsletter)
