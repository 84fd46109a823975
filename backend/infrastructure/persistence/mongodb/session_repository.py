"""MongoDB session repository."""

from typing import Any, Dict, Optional

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoSessionRepository(MongoBaseRepository, ISessionRepository):
    """Sessions keyed by token in the ``sessions`` collection."""

    @property
    def collection_name(self) -> str:
        return "sessions"

    async def save(self, session: Session) -> None:
        document = {
            "session_id": session.session_id,
            "user_id": str(session.user_id),
            "created_at": session.created_at,
            "expires_at": session.expires_at,
        }
        await self._update_one(
            {"session_id": session.session_id}, {"$set": document}, upsert=True
        )

    async def find_by_id(self, session_id: str) -> Optional[Session]:
        document = await self._find_one({"session_id": session_id})
        if not document:
            return None
        return self.from_document(document)

    async def delete(self, session_id: str) -> bool:
        return await self._delete_one({"session_id": session_id}) > 0

    def from_document(self, document: Dict[str, Any]) -> Session:
        return Session(
            session_id=document["session_id"],
            user_id=UserId(str(document["user_id"])),
            created_at=self.as_utc(document["created_at"]),
            expires_at=self.as_utc(document["expires_at"]),
        )
