"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class InvalidEmailError(UserDomainError):
    """Email address does not match the accepted format."""

    def __init__(self, value: str):
        """Initialize with the rejected value.

        Args:
            value: Trimmed input that failed validation
        """
        self.value = value
        super().__init__(f"Invalid email address: '{value}'")
