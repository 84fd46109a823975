"""Domain layer for the storefront profile service.

Business rules for users, sessions, orders and loyalty points, decoupled
from the GraphQL presentation and from the persistence infrastructure.
"""
