"""Repository interfaces for the gallery domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from gallery.domain.repository.design import DesignRepository
from gallery.domain.repository.trash import TrashRepository
from gallery.domain.repository.unit_of_work import UnitOfWork
from gallery.domain.repository.vote import VoteRepository

__all__ = [
    "DesignRepository",
    "TrashRepository",
    "UnitOfWork",
    "VoteRepository",
]
