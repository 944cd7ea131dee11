"""Dependency injection with dishka.

``PROVIDERS`` lists one class per concern. A class with no subclasses is
used as is; a class with subclasses is a mockable component whose
implementation is picked by ``get_provider``.
"""

from typing import Type

from murmur.util.di.application import ProdApplicationProvider
from murmur.util.di.base import Component, DependencyInjectionError, ProviderBase
from murmur.util.di.core import ProdConfigProvider
from murmur.util.di.domain import ProdDomainProvider
from murmur.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Raises:
        DependencyInjectionError: If a mockable component has no
            implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    raise DependencyInjectionError(
        f"No {'mock' if use_mock else 'production'} implementation "
        f"for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "DependencyInjectionError",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
