"""Toast collector."""

from dataclasses import dataclass
from typing import List, Optional

from domain.shared.ports.notifier import INotifier

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Toast:
    level: str
    message: str


class ToastQueue(INotifier):
    """Collects toasts raised while handling one request.

    The API layer returns them to the client alongside the response.

    Examples:
        >>> toasts = ToastQueue()
        >>> toasts.success("Email saved")
        >>> toasts.last().message
        'Email saved'
    """

    def __init__(self) -> None:
        self._toasts: List[Toast] = []

    def success(self, message: str) -> None:
        self._toasts.append(Toast(SUCCESS, message))

    def error(self, message: str) -> None:
        self._toasts.append(Toast(ERROR, message))

    @property
    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def last(self) -> Optional[Toast]:
        return self._toasts[-1] if self._toasts else None

    def drain(self) -> List[Toast]:
        """Return and forget collected toasts."""
        toasts, self._toasts = self._toasts, []
        return toasts
