"""UserId value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Opaque identifier issued by the authentication system (numeric ids,
    UUIDs and provider-prefixed ids all occur). Immutable and non-empty.

    Examples:
        >>> user_id = UserId("10042")
        >>> str(user_id)
        '10042'

        >>> UserId("   ")
        Traceback (most recent call last):
        ...
        ValueError: UserId cannot be empty
    """

    value: str

    def __post_init__(self) -> None:
        """Validate identifier."""
        if not isinstance(self.value, str):
            raise ValueError(f"UserId must be a string, got {type(self.value).__name__}")
        if not self.value.strip():
            raise ValueError("UserId cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        """String representation returns the raw identifier."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"UserId('{self.value}')"
