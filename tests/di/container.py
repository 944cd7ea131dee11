"""Test container: mocks by default, production components on request."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from murmur.util.di import (
    PROVIDERS,
    Component,
    DependencyInjectionError,
    ProviderBase,
    get_provider,
)


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"persistence"}`` for tests against a live database

    Raises:
        DependencyInjectionError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - _mockable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {unknown}")

    providers = [
        get_provider(base, use_mock=_is_mocked(base, unmock))() for base in PROVIDERS
    ]
    # FastapiProvider lets the same container serve the app in E2E tests
    return make_async_container(*providers, FastapiProvider())


def _mockable_components() -> set[str]:
    return {base.__mock_component__ for base in PROVIDERS if base.__mock_component__}


def _is_mocked(base: type[ProviderBase], unmock: set[Component]) -> bool:
    component = base.__mock_component__
    return component is not None and component not in unmock
