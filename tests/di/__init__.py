"""Test-side DI: mock providers and the container that selects them."""

# Importing the mock registers it as a PersistenceProvider subclass
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
