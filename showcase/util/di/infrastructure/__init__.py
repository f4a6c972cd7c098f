"""Infrastructure providers.

Implementations are imported here so that ``__subclasses__()`` on each base
finds them.
"""

from .newsletter import NewsletterProvider, ProdNewsletterProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "NewsletterProvider",
    "PersistenceProvider",
    "ProdNewsletterProvider",
    "ProdPersistenceProvider",
]
