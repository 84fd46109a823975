"""GraphQL API (Strawberry).

Named ``graphql_api`` so it does not shadow the ``graphql`` package of
graphql-core, which Strawberry imports.
"""
