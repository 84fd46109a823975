"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory

All MongoDB repositories share one motor client per process.

Usage:
    from infrastructure.persistence.factory import get_user_repository

    repo = get_user_repository()  # Singleton, inmemory or mongodb based on env
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.loyalty.core.ports.points_repository import IPointsRepository
from domain.order.core.ports.order_repository import IOrderRepository
from domain.session.core.ports.session_repository import ISessionRepository
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_mongodb_uri, get_repository_backend
from infrastructure.persistence.in_memory.order_repository import InMemoryOrderRepository
from infrastructure.persistence.in_memory.points_repository import InMemoryPointsRepository
from infrastructure.persistence.in_memory.session_repository import InMemorySessionRepository
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository

BACKEND_INMEMORY = "inmemory"
BACKEND_MONGODB = "mongodb"

_mongo_client: Optional[AsyncIOMotorClient] = None


def _use_mongodb() -> bool:
    """Read REPOSITORY_BACKEND.

    Raises:
        ValueError: On an unknown backend name
    """
    backend = get_repository_backend()
    if backend == BACKEND_MONGODB:
        return True
    if backend == BACKEND_INMEMORY:
        return False
    raise ValueError(
        f"Invalid REPOSITORY_BACKEND value: {backend}. "
        f"Expected '{BACKEND_INMEMORY}' or '{BACKEND_MONGODB}'"
    )


def get_mongo_client() -> AsyncIOMotorClient:
    """Shared motor client (created on first use).

    Raises:
        ValueError: If MONGODB_URI is not set
    """
    global _mongo_client
    if _mongo_client is None:
        uri = get_mongodb_uri()
        if not uri:
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        _mongo_client = AsyncIOMotorClient(uri)
    return _mongo_client


def create_user_repository() -> IUserRepository:
    """Create user repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        from infrastructure.persistence.mongodb.user_repository import MongoUserRepository

        return MongoUserRepository(get_mongo_client())
    return InMemoryUserRepository()


def create_order_repository() -> IOrderRepository:
    """Create order repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        from infrastructure.persistence.mongodb.order_repository import MongoOrderRepository

        return MongoOrderRepository(get_mongo_client())
    return InMemoryOrderRepository()


def create_points_repository() -> IPointsRepository:
    """Create loyalty points repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        from infrastructure.persistence.mongodb.points_repository import MongoPointsRepository

        return MongoPointsRepository(get_mongo_client())
    return InMemoryPointsRepository()


def create_session_repository() -> ISessionRepository:
    """Create session repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        from infrastructure.persistence.mongodb.session_repository import MongoSessionRepository

        return MongoSessionRepository(get_mongo_client())
    return InMemorySessionRepository()


# Singleton instances (lazy initialization)
_user_repository: Optional[IUserRepository] = None
_order_repository: Optional[IOrderRepository] = None
_points_repository: Optional[IPointsRepository] = None
_session_repository: Optional[ISessionRepository] = None


def get_user_repository() -> IUserRepository:
    global _user_repository
    if _user_repository is None:
        _user_repository = create_user_repository()
    return _user_repository


def get_order_repository() -> IOrderRepository:
    global _order_repository
    if _order_repository is None:
        _order_repository = create_order_repository()
    return _order_repository


def get_points_repository() -> IPointsRepository:
    global _points_repository
    if _points_repository is None:
        _points_repository = create_points_repository()
    return _points_repository


def get_session_repository() -> ISessionRepository:
    global _session_repository
    if _session_repository is None:
        _session_repository = create_session_repository()
    return _session_repository


def reset_repositories() -> None:
    """Reset singletons and the shared client.

    Useful for testing to force re-creation with different env vars.
    """
    global _user_repository, _order_repository, _points_repository, _session_repository
    global _mongo_client
    _user_repository = None
    _order_repository = None
    _points_repository = None
    _session_repository = None
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
