"""Session repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.session.core.entities.session import Session


class ISessionRepository(ABC):
    """Repository interface for sessions."""

    @abstractmethod
    async def save(self, session: Session) -> None:
        """Persist a session."""
        pass

    @abstractmethod
    async def find_by_id(self, session_id: str) -> Optional[Session]:
        """Find session by token.

        Returns:
            Session if found (expired or not), None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """Delete a session.

        Returns:
            True if a session was deleted, False if it did not exist
        """
        pass
