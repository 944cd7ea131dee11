"""Provider base class and component names for the container."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory implementations
Component = Literal["persistence"]


class DependencyInjectionError(Exception):
    """Raised when the container cannot be assembled as requested."""


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A mockable component is declared by a base class that sets
    ``__mock_component__`` and has one subclass per implementation,
    told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
