from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import UserStore
from ..types.user import User

if TYPE_CHECKING:
    from ..mutations.root import UpdateUserInput, UserInput

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> UserStore:
    """Return the user store attached to the request context."""
    store = info.context["store"]
    if not isinstance(store, UserStore):
        raise RuntimeError("GraphQL context does not carry a user store")
    return store


def _provided(value: str | None) -> str | None:
    # UNSET (omitted) and explicit null both mean "leave unchanged"
    if value is strawberry.UNSET:
        return None
    return value


# Query resolvers
async def resolve_hello() -> str:
    return "Hello world!"


async def resolve_users(info: strawberry.Info) -> list[User]:
    store = get_store_from_info(info)
    return [User.from_record(record) for record in store.list_users()]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    """Resolve a user by ID; a missing ID yields null rather than an error."""
    store = get_store_from_info(info)
    record = store.get_user(str(id))
    if record is None:
        logger.debug("User not found", user_id=str(id))
        return None
    return User.from_record(record)


# Mutation resolvers
async def create_user(info: strawberry.Info, input: UserInput) -> User:
    store = get_store_from_info(info)
    record = store.create_user(input.name, input.email)
    return User.from_record(record)


async def update_user(info: strawberry.Info, id: str, input: UpdateUserInput) -> User:
    store = get_store_from_info(info)
    record = store.update_user(
        str(id),
        name=_provided(input.name),
        email=_provided(input.email),
    )
    return User.from_record(record)


async def delete_user(info: strawberry.Info, id: str) -> bool:
    store = get_store_from_info(info)
    return store.delete_user(str(id))
