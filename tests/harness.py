"""Test harness for unit, integration and E2E tests.

Integration runs need PostgreSQL reachable at DATABASE__URL.
Settings are loaded from environment variables unless passed explicitly.
"""

import pytest_asyncio

from gallery.config import Settings
from gallery.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for
        settings: Fixed settings for the container

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_submit(unit_env):
            service = await unit_env.get(DesignService)
            design = await service.submit_design(principal, "Helmet", url)
            assert design.score == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set(), settings=settings)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
