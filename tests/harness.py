"""Test harness for service-level tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from thredge.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container and yields
    a request-scoped container for resolving services and repositories.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - PostgreSQL must be running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_thread(unit_env):
            service = await unit_env.get(ThreadService)
            thread = await service.create_thread("Hello")
            assert thread.title == "Hello"
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
