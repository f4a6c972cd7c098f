"""Newsletter adapter."""

from .client import (
    BeehiivNewsletterClient,
    MockNewsletterClient,
    NewsletterError,
)

__all__ = ["BeehiivNewsletterClient", "MockNewsletterClient", "NewsletterError"]
