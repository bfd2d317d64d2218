"""
User GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...store.models import UserRecord


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    created_at: str

    @classmethod
    def from_record(cls, record: UserRecord) -> User:
        """Convert a stored record to the GraphQL type."""
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            created_at=record.created_at,
        )
