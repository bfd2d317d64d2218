"""
In-memory user store.

Holds user records in insertion order together with the ID counter. Every
read-modify-write sequence runs under one lock so ID and email uniqueness
hold when requests are served concurrently.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import UTC, datetime

from ..errors import NotFoundError, ValidationError
from ..logging import get_logger
from .models import UserRecord, format_timestamp
from .validation import clean_email, clean_name

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class UserStore:
    """Ordered collection of user records plus a monotonically increasing ID counter."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._records: list[UserRecord] = []
        self._next_id = 1
        self._clock = clock
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def next_id(self) -> int:
        """The ID the next created user will receive."""
        return self._next_id

    def restore(self, records: Iterable[UserRecord]) -> None:
        """Append existing records verbatim, keeping the counter above every ID seen.

        Raises:
            ValidationError: If a record repeats an ID or email already in the store
        """
        with self._lock:
            for record in records:
                if self._index_of(record.id) is not None:
                    raise ValidationError(f"User with id {record.id} already exists")
                if self._email_taken(record.email):
                    raise ValidationError("User with this email already exists")
                self._records.append(record)
                if record.id.isdigit():
                    self._next_id = max(self._next_id, int(record.id) + 1)

    # Queries
    def list_users(self) -> list[UserRecord]:
        """Return every record in insertion order."""
        with self._lock:
            return list(self._records)

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the record with the given ID, or None."""
        with self._lock:
            index = self._index_of(user_id)
            return self._records[index] if index is not None else None

    # Mutations
    def create_user(self, name: str, email: str) -> UserRecord:
        """Validate, normalize and append a new user.

        Raises:
            ValidationError: On a blank name or email, an email without '@',
                or an email already held by another user
        """
        clean = clean_name(name)
        normalized = clean_email(email)

        with self._lock:
            if self._email_taken(normalized):
                raise ValidationError("User with this email already exists")

            record = UserRecord(
                id=str(self._next_id),
                name=clean,
                email=normalized,
                created_at=format_timestamp(self._clock()),
            )
            self._records.append(record)
            self._next_id += 1

        logger.info("User created", user_id=record.id)
        return record

    def update_user(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> UserRecord:
        """Apply a partial update; fields left as None are not touched.

        Raises:
            NotFoundError: If no user has the given ID
            ValidationError: On a blank name or email, an email without '@',
                or an email held by a different user
        """
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise NotFoundError("User not found")

            changes: dict[str, str] = {}
            if name is not None:
                changes["name"] = clean_name(name, required=False)
            if email is not None:
                normalized = clean_email(email, required=False)
                if self._email_taken(normalized, exclude_id=user_id):
                    raise ValidationError("User with this email already exists")
                changes["email"] = normalized

            record = replace(self._records[index], **changes)
            self._records[index] = record

        logger.info("User updated", user_id=user_id, fields=sorted(changes))
        return record

    def delete_user(self, user_id: str) -> bool:
        """Remove the user with the given ID.

        Raises:
            NotFoundError: If no user has the given ID
        """
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise NotFoundError("User not found")
            del self._records[index]

        logger.info("User deleted", user_id=user_id)
        return True

    # Helpers; callers hold the lock
    def _index_of(self, user_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == user_id:
                return index
        return None

    def _email_taken(self, normalized: str, exclude_id: str | None = None) -> bool:
        return any(
            record.email.lower() == normalized and record.id != exclude_id
            for record in self._records
        )
