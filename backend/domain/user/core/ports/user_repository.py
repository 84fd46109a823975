"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def update_email(self, user_id, email):
        ...         # $set on the users collection
        ...         pass
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save user (create or update).

        Args:
            user: User entity to persist

        Note:
            Implementation should be idempotent (upsert by user_id).
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_email(self, user_id: UserId, email: Optional[str]) -> None:
        """Write the contact email of a user.

        Single write keyed by user id; does not read the record first.

        Args:
            user_id: User identifier (from the session)
            email: Validated, trimmed address, or None to clear it
        """
        pass
