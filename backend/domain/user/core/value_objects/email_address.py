"""EmailAddress value object."""

import re
from dataclasses import dataclass
from typing import Optional

from domain.user.core.exceptions.user_errors import InvalidEmailError

# One "@", no whitespace on either side, at least one dot in the domain part.
# Deliberately loose: "a@b.c" passes, so does "a@b..c".
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: str) -> bool:
    """Check a string against the email pattern.

    Examples:
        >>> is_valid_email("a@b.com")
        True
        >>> is_valid_email("not-an-email")
        False
    """
    return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class EmailAddress:
    """Contact email address of a user.

    Examples:
        >>> EmailAddress("a@b.com").value
        'a@b.com'

        >>> EmailAddress.parse("  a@b.com ")
        EmailAddress('a@b.com')

        >>> EmailAddress.parse("   ") is None
        True
    """

    value: str

    def __post_init__(self) -> None:
        """Validate format."""
        if not isinstance(self.value, str) or not is_valid_email(self.value):
            raise InvalidEmailError(str(self.value))

    @staticmethod
    def parse(raw: Optional[str]) -> Optional["EmailAddress"]:
        """Parse user input.

        Surrounding whitespace is stripped. Empty input means "clear the
        email" and yields None.

        Args:
            raw: Raw form input (None is treated as empty)

        Returns:
            EmailAddress, or None when the trimmed input is empty

        Raises:
            InvalidEmailError: If the trimmed input is not a valid address
        """
        trimmed = (raw or "").strip()
        if not trimmed:
            return None
        return EmailAddress(trimmed)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EmailAddress('{self.value}')"
