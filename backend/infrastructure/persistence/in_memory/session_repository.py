"""In-memory session repository."""

from typing import Dict, Optional

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository


class InMemorySessionRepository(ISessionRepository):
    """Sessions in a dict keyed by token."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}

    async def save(self, session: Session) -> None:
        self._sessions[session.session_id] = session

    async def find_by_id(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    async def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        self._sessions.clear()
