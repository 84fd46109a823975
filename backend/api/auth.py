"""REST endpoint terminating the current session.

The profile page's sign-out control posts here; the response clears the
session cookie and redirects to the requested same-site path.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import RedirectResponse

from application.session.commands.sign_out import HOME_PATH, SignOutCommand
from domain.session.core.ports.session_repository import ISessionRepository
from infrastructure.config import get_session_cookie_name
from infrastructure.persistence.factory import get_session_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signout")
async def sign_out(
    request: Request,
    callback_url: Optional[str] = Query(default=HOME_PATH, alias="callbackUrl"),
    repository: ISessionRepository = Depends(get_session_repository),
) -> RedirectResponse:
    """Terminate the session and redirect.

    Args:
        callback_url: Post-logout path; off-site targets fall back to "/"

    Returns:
        303 redirect that also deletes the session cookie
    """
    token = getattr(request.state, "session_token", None)
    target = await SignOutCommand(repository).execute(token, callback_url)

    response = RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(get_session_cookie_name())
    return response
