"""FastAPI session middleware."""

import logging
from typing import Any, Callable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from infrastructure.config import get_session_cookie_name, is_session_required

logger = logging.getLogger(__name__)

# Sign-out must work with an expired session so the stale cookie gets cleared
PUBLIC_PATHS = ("/health", "/version", "/auth/signout")


class SessionMiddleware(BaseHTTPMiddleware):
    """Resolve the current session for every request.

    The session token is read from ``Authorization: Bearer <token>`` or,
    failing that, from the session cookie. Downstream handlers find:

    - ``request.state.session``: the live Session, or None
    - ``request.state.session_token``: the raw token sent, or None

    Unknown and expired tokens count as "no session". Requests are only
    rejected (401) when ``SESSION_REQUIRED=true``; paths in
    ``public_paths`` always pass.

    Examples:
        >>> app.add_middleware(SessionMiddleware, repository_getter=get_session_repository)
        >>> # In route handler:
        >>> session = request.state.session
    """

    def __init__(
        self,
        app: Any,
        repository_getter: Callable[[], ISessionRepository],
        cookie_name: Optional[str] = None,
        session_required: Optional[bool] = None,
        public_paths: tuple = PUBLIC_PATHS,
    ) -> None:
        """Initialize middleware.

        Args:
            app: FastAPI application
            repository_getter: Returns the session repository (called per request)
            cookie_name: Session cookie name (defaults to SESSION_COOKIE_NAME)
            session_required: Reject anonymous requests (defaults to SESSION_REQUIRED)
            public_paths: Paths never rejected for missing sessions
        """
        super().__init__(app)
        self.repository_getter = repository_getter
        self.cookie_name = cookie_name or get_session_cookie_name()
        self.session_required = (
            is_session_required() if session_required is None else session_required
        )
        self.public_paths = public_paths

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        token = self._extract_bearer(request.headers.get("Authorization"))
        if token is None:
            token = request.cookies.get(self.cookie_name) or None

        request.state.session_token = token
        request.state.session = await self._resolve(token)

        if (
            request.state.session is None
            and self.session_required
            and request.url.path not in self.public_paths
        ):
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "unauthorized", "message": "Missing or expired session"},
            )

        return await call_next(request)

    async def _resolve(self, token: Optional[str]) -> Optional[Session]:
        if not token:
            return None
        session = await self.repository_getter().find_by_id(token)
        if session is None:
            logger.debug("session.unknown_token")
            return None
        if session.is_expired():
            logger.info("session.expired", extra={"user_id": str(session.user_id)})
            return None
        return session

    @staticmethod
    def _extract_bearer(auth_header: Optional[str]) -> Optional[str]:
        """Extract Bearer token from Authorization header.

        Examples:
            >>> SessionMiddleware._extract_bearer("Bearer abc")
            'abc'
            >>> SessionMiddleware._extract_bearer("abc") is None
            True
        """
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2:
            return None

        scheme, token = parts
        if scheme.lower() != "bearer":
            return None

        return token
