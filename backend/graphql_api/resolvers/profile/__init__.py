"""Profile GraphQL resolvers."""

from graphql_api.resolvers.profile.queries import ProfileQueries
from graphql_api.resolvers.profile.mutations import ProfileMutations

__all__ = ["ProfileQueries", "ProfileMutations"]
