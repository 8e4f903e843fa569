"""Mock providers for testing."""

from .imagehost import MockImageHostProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockImageHostProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
