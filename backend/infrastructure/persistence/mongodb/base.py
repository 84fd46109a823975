"""Base MongoDB repository.

Shared plumbing for the MongoDB adapters: client/collection resolution,
logged CRUD helpers and UTC datetime normalisation.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from infrastructure.config import get_mongodb_database, get_mongodb_uri

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC):
    """
    Abstract base class for MongoDB repositories.

    Subclasses declare ``collection_name`` and use the ``_find_one``,
    ``_find_many``, ``_update_one``, ``_delete_one`` and ``_count`` helpers,
    which log failures with the collection name and re-raise.

    Example:
        class MongoPointsRepository(MongoBaseRepository, IPointsRepository):
            @property
            def collection_name(self) -> str:
                return "loyalty_points"
    """

    def __init__(self, client: Optional[AsyncIOMotorClient] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not set. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            client = AsyncIOMotorClient(uri)

        self._client = client
        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "mongodb.repository_ready",
            extra={"repository": self.__class__.__name__, "collection": self.collection_name},
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def as_utc(value: Optional[datetime]) -> Optional[datetime]:
        """Attach UTC to naive datetimes returned by the driver."""
        if value is None or value.tzinfo is not None:
            return value
        return value.replace(tzinfo=timezone.utc)

    def _log_failure(self, operation: str, filter_dict: Dict[str, Any], error: Exception) -> None:
        logger.error(
            "mongodb.operation_failed",
            extra={
                "operation": operation,
                "collection": self.collection_name,
                "filter_keys": sorted(filter_dict),
                "error": str(error),
            },
        )

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        try:
            return await self._collection.find_one(filter_dict, projection)
        except Exception as e:
            self._log_failure("find_one", filter_dict, e)
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
        projection: Optional[Dict[str, int]] = None,
    ) -> List[Dict[str, Any]]:
        try:
            cursor = self._collection.find(filter_dict, projection)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except Exception as e:
            self._log_failure("find_many", filter_dict, e)
            raise

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> int:
        """Returns the number of matched documents (0 or 1)."""
        try:
            result = await self._collection.update_one(filter_dict, update_dict, upsert=upsert)
            return result.matched_count
        except Exception as e:
            self._log_failure("update_one", filter_dict, e)
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            self._log_failure("delete_one", filter_dict, e)
            raise

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        try:
            return await self._collection.count_documents(filter_dict)
        except Exception as e:
            self._log_failure("count", filter_dict, e)
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
