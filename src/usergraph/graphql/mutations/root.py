"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


# Input types for mutations
@strawberry.input
class UserInput:
    """Input for creating a new user."""

    name: str
    email: str


@strawberry.input
class UpdateUserInput:
    """Input for updating a user. Omitted or null fields are left unchanged."""

    name: str | None = strawberry.UNSET
    email: str | None = strawberry.UNSET


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: UserInput) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, input)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateUserInput
    ) -> User | None:
        """Update the provided fields of an existing user."""
        from ..resolvers.user import update_user

        return await update_user(info, id, input)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)
