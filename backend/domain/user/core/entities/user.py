"""User entity - aggregate root."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.email_address import EmailAddress


@dataclass
class User:
    """User aggregate root.

    Represents the signed-in user as shown on the profile page. Name,
    username and avatar come from the authentication provider and are
    read-only here; the contact email is the only field this service
    writes.

    Invariants:
    - user_id is immutable
    - change_email only accepts validated addresses; emails loaded from
      storage are shown as-is

    Examples:
        >>> user = User(user_id=UserId("42"), name="Ada", username="ada")
        >>> user.handle
        '@ada'

        >>> user.change_email(EmailAddress("ada@example.com"))
        >>> user.email
        'ada@example.com'

        >>> user.change_email(None)
        >>> user.email is None
        True
    """

    user_id: UserId
    name: str
    username: Optional[str] = None
    avatar: Optional[str] = None
    email: Optional[str] = None

    @property
    def handle(self) -> Optional[str]:
        """Username prefixed with ``@``, None when the user has no username."""
        if not self.username:
            return None
        return f"@{self.username}"

    def change_email(self, email: Optional[EmailAddress]) -> None:
        """Set or clear the contact email.

        Args:
            email: Validated address, or None to clear it
        """
        self.email = email.value if email is not None else None

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
