"""Newsletter use cases."""

from .subscribe_newsletter import (
    SubscribeNewsletterRequest,
    SubscribeNewsletterResponse,
    SubscribeNewsletterUseCase,
)

__all__ = [
    "SubscribeNewsletterRequest",
    "SubscribeNewsletterResponse",
    "SubscribeNewsletterUseCase",
]
