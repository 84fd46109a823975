"""Inline email form of the profile page."""

from typing import Awaitable, Callable, Optional
import logging

from application.user.results import ActionResult, ERROR_GENERIC
from domain.shared.ports.notifier import INotifier
from domain.shared.ports.translator import ITranslator

logger = logging.getLogger(__name__)

UpdateEmailAction = Callable[[str], Awaitable[ActionResult]]


class EmailForm:
    """Editable email field bound to the update action.

    Holds a local copy of the email and a ``saving`` flag that disables
    the input and the save button while a request is in flight. The flag
    is advisory UI state, not a lock on the user record.

    Examples:
        >>> form = EmailForm("old@b.com", action, translator, toasts)
        >>> form.set_email(" a@b.com ")
        >>> await form.save()
        ActionResult(success=True, error=None)
        >>> form.saving
        False
    """

    def __init__(
        self,
        initial_email: Optional[str],
        action: UpdateEmailAction,
        translator: ITranslator,
        notifier: INotifier,
    ) -> None:
        self.email = initial_email or ""
        self.saving = False
        self._action = action
        self._translator = translator
        self._notifier = notifier

    @property
    def disabled(self) -> bool:
        """Input and button are disabled while saving."""
        return self.saving

    def set_email(self, value: str) -> None:
        """Edit the field (ignored while the input is disabled)."""
        if self.disabled:
            return
        self.email = value

    async def save(self) -> Optional[ActionResult]:
        """Submit the current value.

        Every outcome ends in exactly one toast. Unexpected exceptions from
        the action are logged and reported as ``common.error``; they are
        not re-raised.

        Returns:
            The action result, or None when the save was skipped (already
            saving) or the action raised
        """
        if self.saving:
            return None

        t = self._translator.t
        self.saving = True
        try:
            result = await self._action(self.email)
            if result is not None and result.success:
                self._notifier.success(t("profile.emailSaved"))
            elif result is not None and result.error:
                self._notifier.error(t(result.error))
            else:
                self._notifier.error(t(ERROR_GENERIC))
            return result
        except Exception:
            logger.exception("profile.email.save_failed")
            self._notifier.error(t(ERROR_GENERIC))
            return None
        finally:
            self.saving = False
