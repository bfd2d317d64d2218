"""
End-to-end smoke check against a running usergraph server.

Runs hello, users and user lookups, then creates, updates and deletes a
throwaway user, stopping at the first step that fails.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

import httpx

from .logging import get_logger

logger = get_logger(__name__)

USERS_QUERY = "{ users { id name email } }"
USER_QUERY = "query GetUser($id: ID!) { user(id: $id) { id name email } }"
CREATE_USER_MUTATION = (
    "mutation CreateUser($input: UserInput!) "
    "{ createUser(input: $input) { id name email createdAt } }"
)
UPDATE_USER_MUTATION = (
    "mutation UpdateUser($id: ID!, $input: UpdateUserInput!) "
    "{ updateUser(id: $id, input: $input) { id name email } }"
)
DELETE_USER_MUTATION = "mutation DeleteUser($id: ID!) { deleteUser(id: $id) }"


class SmokeTestError(Exception):
    """Raised when a smoke step gets an unexpected response."""


def graphql_request(
    client: httpx.Client,
    url: str,
    query: str,
    variables: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """POST a GraphQL request and return its ``data``.

    Raises:
        SmokeTestError: On a non-200 status or an ``errors`` entry in the response
    """
    response = client.post(url, json={"query": query, "variables": variables or {}})
    if response.status_code != 200:
        raise SmokeTestError(f"HTTP {response.status_code}: {response.text}")

    payload = response.json()
    if payload.get("errors"):
        messages = "; ".join(error.get("message", "") for error in payload["errors"])
        raise SmokeTestError(messages)
    return payload["data"]


def run_smoke(
    client: httpx.Client,
    url: str = "/graphql",
    report: Callable[[str], None] = print,
) -> None:
    """Run every smoke step, reporting one line per passed step.

    Raises:
        SmokeTestError: On the first failed step
        httpx.HTTPError: If the server cannot be reached
    """
    data = graphql_request(client, url, "{ hello }")
    if data["hello"] != "Hello world!":
        raise SmokeTestError(f"Unexpected greeting: {data['hello']!r}")
    report(f"hello: {data['hello']}")

    users = graphql_request(client, url, USERS_QUERY)["users"]
    report(f"users: found {len(users)}")
    if not users:
        raise SmokeTestError("No users available to look up")

    first_id = users[0]["id"]
    user = graphql_request(client, url, USER_QUERY, {"id": first_id})["user"]
    if user is None or user["id"] != first_id:
        raise SmokeTestError(f"User {first_id} could not be fetched")
    report(f"user: {user['name']}")

    email = f"smoke-{uuid.uuid4().hex[:12]}@example.com"
    created = graphql_request(
        client, url, CREATE_USER_MUTATION, {"input": {"name": "Test User", "email": email}}
    )["createUser"]
    new_id = created["id"]
    report(f"createUser: id {new_id}")

    updated = graphql_request(
        client, url, UPDATE_USER_MUTATION, {"id": new_id, "input": {"name": "Updated Test User"}}
    )["updateUser"]
    if updated["name"] != "Updated Test User" or updated["email"] != email:
        raise SmokeTestError(f"Update returned unexpected user: {updated}")
    report(f"updateUser: {updated['name']}")

    deleted = graphql_request(client, url, DELETE_USER_MUTATION, {"id": new_id})["deleteUser"]
    if deleted is not True:
        raise SmokeTestError(f"Delete of user {new_id} returned {deleted!r}")
    report("deleteUser: true")

    logger.info("Smoke check passed", url=url, created_id=new_id)
