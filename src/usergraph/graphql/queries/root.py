"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def hello(self) -> str | None:
        """Greeting used to check the API is reachable."""
        from ..resolvers.user import resolve_hello

        return await resolve_hello()

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get every user in insertion order."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)
