"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient

from usergraph.store import UserStore, seed_users

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0, 123000, tzinfo=UTC)


@pytest.fixture
def empty_store() -> UserStore:
    """A store with no records and a fixed clock."""
    return UserStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def store() -> UserStore:
    """A store holding the three seed users."""
    return seed_users(UserStore(clock=lambda: FIXED_NOW))


@pytest.fixture
def client(store: UserStore) -> Generator[TestClient, None, None]:
    """HTTP client for an app serving the seeded ``store`` fixture."""
    from usergraph.api.app import create_app

    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
