"""Notifier port (interface) for transient UI feedback."""

from abc import ABC, abstractmethod


class INotifier(ABC):
    """Toast sink.

    Receives already-localized messages. Implementations decide how they
    reach the user (collected into a response, pushed over a socket, ...).
    """

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a success toast."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error toast."""
        pass
