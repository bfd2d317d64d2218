"""
Seed data for a freshly started store.

The service starts with three known users so the API is explorable right away.
"""

from __future__ import annotations

from ..logging import get_logger
from .memory import UserStore
from .models import UserRecord

logger = get_logger(__name__)


SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(
        id="1",
        name="Alice Johnson",
        email="alice@example.com",
        created_at="2024-01-15T10:30:00Z",
    ),
    UserRecord(
        id="2",
        name="Bob Smith",
        email="bob@example.com",
        created_at="2024-01-16T14:20:00Z",
    ),
    UserRecord(
        id="3",
        name="Charlie Brown",
        email="charlie@example.com",
        created_at="2024-01-17T09:15:00Z",
    ),
)


def seed_users(store: UserStore) -> UserStore:
    """Load the seed users into ``store`` and return it."""
    store.restore(SEED_USERS)
    logger.debug("Seed users loaded", count=len(SEED_USERS), next_id=store.next_id)
    return store


def create_store(seed: bool = True) -> UserStore:
    """Create a new store, optionally pre-populated with the seed users."""
    store = UserStore()
    if seed:
        seed_users(store)
    return store
