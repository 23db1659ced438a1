"""Pytest configuration and fixtures."""
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from timetrack.clock import FixedClock
from timetrack.main import create_app
from timetrack.store import TimeStore


START = datetime(2025, 11, 10, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Clock pinned to 2025-11-10T10:00:00Z."""
    return FixedClock(START)


@pytest.fixture
def store():
    """Fresh, empty time store."""
    store = TimeStore()
    yield store
    store.reset()


@pytest_asyncio.fixture
async def app_client(store, clock):
    """
    Create a test client over a fresh store and a pinned clock.

    The store and clock fixtures are the ones the app serves, so tests can
    move the clock between requests.
    """
    app = create_app(store=store, clock=clock)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client
