"""Error types raised by the record store and surfaced through GraphQL."""

from __future__ import annotations

from typing import Any


class UserGraphError(Exception):
    """Base exception for user record operations.

    graphql-core copies ``extensions`` from the original exception onto the
    ``GraphQLError`` it builds, so ``code`` reaches the client unchanged.
    """

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class ValidationError(UserGraphError):
    """Malformed or conflicting input (blank fields, bad or duplicate email)."""

    code = "BAD_USER_INPUT"


class NotFoundError(UserGraphError):
    """The referenced user ID does not exist."""

    code = "NOT_FOUND"
