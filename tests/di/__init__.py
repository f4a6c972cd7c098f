"""Mock providers for testing."""

from .newsletter import MockNewsletterProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockNewsletterProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
