"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests can swap for an in-process fake
Component = Literal["newsletter", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Mockable components set ``__mock_component__`` on a base class and ship
    one subclass per implementation, told apart by ``__is_mock__``.
    ``__depends_on__`` lists components that must also be real when this
    one is unmocked.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
