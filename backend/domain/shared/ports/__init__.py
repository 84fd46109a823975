"""Shared domain ports.

Interfaces used across bounded contexts.
"""

from domain.shared.ports.event_bus import IEventBus
from domain.shared.ports.notifier import INotifier
from domain.shared.ports.translator import ITranslator

__all__ = ["IEventBus", "INotifier", "ITranslator"]
