"""Mock persistence providers for testing."""

from dishka import Scope, provide

from gallery.domain.repository import (
    DesignRepository,
    TrashRepository,
    UnitOfWork,
    VoteRepository,
)
from gallery.persistence.repository.inmemory import (
    InMemoryDesignRepository,
    InMemoryTrashRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from gallery.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so state survives across requests to one test app. Every test
    builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_design_repository(self) -> DesignRepository:
        """Provide in-memory design repository."""
        return InMemoryDesignRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_trash_repository(self) -> TrashRepository:
        """Provide in-memory trash repository."""
        return InMemoryTrashRepository()

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
