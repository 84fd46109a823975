"""GraphQL schema.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from graphql_api.resolvers.profile import ProfileMutations, ProfileQueries


@strawberry.type
class Query:
    @strawberry.field(description="Profile page queries")
    def profile(self) -> ProfileQueries:
        """Profile page of the signed-in user.

        Example:
            query {
              profile { view { user { name } } }
            }
        """
        return ProfileQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Profile mutations")
    def profile(self) -> ProfileMutations:
        """Profile form actions.

        Example:
            mutation {
              profile { updateEmail(email: "a@b.com") { success error message } }
            }
        """
        return ProfileMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the profile resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
