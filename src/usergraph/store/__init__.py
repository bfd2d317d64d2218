"""
In-memory record store for users
"""

from .memory import UserStore
from .models import UserRecord
from .seed_data import SEED_USERS, create_store, seed_users

__all__ = [
    "SEED_USERS",
    "UserRecord",
    "UserStore",
    "create_store",
    "seed_users",
]
