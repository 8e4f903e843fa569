"""PostgreSQL repository implementations."""

from gallery.persistence.repository.design import PostgresDesignRepository
from gallery.persistence.repository.trash import PostgresTrashRepository
from gallery.persistence.repository.unit_of_work import PostgresUnitOfWork
from gallery.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresDesignRepository",
    "PostgresTrashRepository",
    "PostgresUnitOfWork",
    "PostgresVoteRepository",
]
