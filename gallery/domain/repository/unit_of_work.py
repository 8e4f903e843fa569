"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Makes the changes written through the repositories durable."""

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending changes.

        Raises:
            StoreUnavailableError: If the store rejects the commit
        """
        pass
