"""In-memory repository implementations for testing."""

from .design import InMemoryDesignRepository
from .trash import InMemoryTrashRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDesignRepository",
    "InMemoryTrashRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
