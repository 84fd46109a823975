"""MongoDB User Repository implementation."""

from typing import Any, Dict, Optional

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository, IUserRepository):
    """MongoDB implementation of User repository.

    Document shape (collection ``users``)::

        {"user_id": "42", "name": "Ada", "username": "ada",
         "avatar": "https://...", "email": "ada@example.com"}
    """

    @property
    def collection_name(self) -> str:
        return "users"

    async def save(self, user: User) -> None:
        """Upsert by user_id."""
        await self._update_one(
            {"user_id": str(user.user_id)},
            {"$set": self.to_document(user)},
            upsert=True,
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        document = await self._find_one({"user_id": str(user_id)})
        if not document:
            return None
        return self.from_document(document)

    async def update_email(self, user_id: UserId, email: Optional[str]) -> None:
        """Set the email field in place.

        Raises:
            UserNotFoundError: If no document matched the user id
        """
        matched = await self._update_one({"user_id": str(user_id)}, {"$set": {"email": email}})
        if matched == 0:
            raise UserNotFoundError(str(user_id))

    @staticmethod
    def to_document(user: User) -> Dict[str, Any]:
        return {
            "user_id": str(user.user_id),
            "name": user.name,
            "username": user.username,
            "avatar": user.avatar,
            "email": user.email,
        }

    @staticmethod
    def from_document(document: Dict[str, Any]) -> User:
        return User(
            user_id=UserId(str(document["user_id"])),
            name=document.get("name") or "",
            username=document.get("username"),
            avatar=document.get("avatar"),
            email=document.get("email"),
        )
