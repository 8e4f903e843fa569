"""Infrastructure providers."""

# Import bases
from .feed import FeedProvider
from .imagehost import ImageHostProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .imagehost import ProdImageHostProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "FeedProvider",
    "ImageHostProvider",
    "PersistenceProvider",
    "ProdImageHostProvider",
    "ProdPersistenceProvider",
]
