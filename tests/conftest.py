"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio

from tests.helpers import EngineContext, FakeEngine


@pytest.fixture
def now():
    """Fixed render time."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_engine():
    """Fake engine with no images."""
    return FakeEngine()


@pytest_asyncio.fixture
async def engine_context(fake_engine):
    """Serve the fake engine for the duration of a test."""
    async with EngineContext(fake_engine) as ctx:
        yield ctx


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring an engine"
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    # Skip integration tests if no engine
    skip_integration = pytest.mark.skip(reason="Container engine not available")

    for item in items:
        if (
            "integration" in item.keywords
            and os.getenv("DOCKER_AVAILABLE", "false").lower() != "true"
        ):
            item.add_marker(skip_integration)
