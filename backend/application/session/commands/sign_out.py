"""Sign out command."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit
import logging

from domain.session.core.ports.session_repository import ISessionRepository

logger = logging.getLogger(__name__)

HOME_PATH = "/"


def safe_redirect_target(callback_url: Optional[str]) -> str:
    """Restrict post-logout redirects to same-site absolute paths.

    Examples:
        >>> safe_redirect_target("/orders")
        '/orders'
        >>> safe_redirect_target("https://evil.example/")
        '/'
        >>> safe_redirect_target("//evil.example/")
        '/'
    """
    if not callback_url:
        return HOME_PATH
    parts = urlsplit(callback_url)
    if parts.scheme or parts.netloc:
        return HOME_PATH
    if not callback_url.startswith("/") or callback_url.startswith("//"):
        return HOME_PATH
    if "\\" in callback_url:
        return HOME_PATH
    return callback_url


@dataclass
class SignOutCommand:
    """Terminate the current session.

    Signing out without a session (or with an unknown one) still succeeds;
    the caller is redirected either way.
    """

    repository: ISessionRepository

    async def execute(self, session_id: Optional[str], callback_url: Optional[str] = HOME_PATH) -> str:
        """Execute sign out.

        Args:
            session_id: Token of the current session, if any
            callback_url: Requested post-logout location

        Returns:
            Redirect target (validated path)
        """
        target = safe_redirect_target(callback_url)
        if session_id:
            deleted = await self.repository.delete(session_id)
            logger.info("session.signed_out", extra={"had_session": deleted})
        return target
