"""Result type returned by user actions to the view."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# i18n keys carried in failed results
ERROR_GENERIC = "common.error"
ERROR_EMAIL_INVALID = "profile.emailInvalid"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a server action.

    ``error`` is a message key, translated by the caller for display.

    Examples:
        >>> ActionResult.ok().to_dict()
        {'success': True}
        >>> ActionResult.fail("profile.emailInvalid").to_dict()
        {'success': False, 'error': 'profile.emailInvalid'}
    """

    success: bool
    error: Optional[str] = None

    @staticmethod
    def ok() -> "ActionResult":
        return ActionResult(success=True)

    @staticmethod
    def fail(error: str) -> "ActionResult":
        return ActionResult(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape ``{success, error?}``."""
        if self.error is None:
            return {"success": self.success}
        return {"success": self.success, "error": self.error}
