"""In-memory unit of work for testing."""

from gallery.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory repositories apply writes immediately; commits are counted."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
