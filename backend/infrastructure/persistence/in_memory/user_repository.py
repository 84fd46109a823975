"""In-memory User Repository for testing."""

from typing import Dict, List, Optional, Tuple

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserNotFoundError


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores users in a dict keyed by user id and records every email write,
    so tests can assert on what was persisted.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> await repo.save(User(user_id=UserId("42"), name="Ada"))
        >>> await repo.update_email(UserId("42"), "ada@example.com")
        >>> repo.email_writes
        [(UserId('42'), 'ada@example.com')]
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self.email_writes: List[Tuple[UserId, Optional[str]]] = []

    async def save(self, user: User) -> None:
        self._users[str(user.user_id)] = user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(str(user_id))

    async def update_email(self, user_id: UserId, email: Optional[str]) -> None:
        """Write the email of a stored user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = self._users.get(str(user_id))
        if user is None:
            raise UserNotFoundError(str(user_id))
        user.change_email(EmailAddress(email) if email is not None else None)
        self.email_writes.append((user_id, email))

    def clear(self) -> None:
        """Clear all users and recorded writes."""
        self._users.clear()
        self.email_writes.clear()

    def count(self) -> int:
        """Number of users stored."""
        return len(self._users)
