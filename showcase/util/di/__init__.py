"""Dependency injection module.

Providers are listed once in PROVIDERS. Concrete providers are used as-is;
mockable ones are bases whose subclasses are the real and fake
implementations, selected by get_provider.
"""

from typing import Type

from showcase.util.di.application import ProdApplicationProvider
from showcase.util.di.base import Component, ProviderBase
from showcase.util.di.core import ProdConfigProvider
from showcase.util.di.domain import ProdDomainProvider
from showcase.util.di.infrastructure import (
    NewsletterProvider,
    PersistenceProvider,
    ProdNewsletterProvider,
    ProdPersistenceProvider,
)
from showcase.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    NewsletterProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the fake implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind
    """
    implementations = {
        getattr(sub, "__is_mock__", False): sub for sub in base.__subclasses__()
    }
    if not implementations:
        return base

    if use_mock not in implementations:
        kind = "mock" if use_mock else "production"
        component = base.__mock_component__ or base.__name__
        raise DependencyInjectionError(f"No {kind} implementation for {component}")

    return implementations[use_mock]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "NewsletterProvider",
    "PersistenceProvider",
    "ProdNewsletterProvider",
    "ProdPersistenceProvider",
]
