"""
Craps Engine - Change Notification

Listener registry used by the engine to broadcast property changes.
Listeners are called synchronously, in registration order, from inside
the mutating engine call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from src.engine.base import GameProperty

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str, Any, Any], None]


@dataclass(frozen=True)
class PropertyChange:
    """A single recorded property change."""

    name: str
    old_value: Any
    new_value: Any


class ChangeSupport:
    """Holds registered listeners and fires property changes to them.

    A change whose old and new values are equal is not delivered, unless
    the old value is None (used to force a notification).
    """

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def add(self, listener: ChangeListener) -> None:
        """Register a listener. Registering twice delivers twice."""
        self._listeners.append(listener)

    def remove(self, listener: ChangeListener) -> None:
        """Remove one registration of a listener; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Listener %r was not registered", listener)

    @property
    def listeners(self) -> tuple[ChangeListener, ...]:
        return tuple(self._listeners)

    def fire(self, prop: GameProperty | str, old_value: Any, new_value: Any) -> None:
        """Deliver a change to every listener registered at the time of the call."""
        if old_value is not None and old_value == new_value:
            return

        name = prop.value if isinstance(prop, GameProperty) else prop
        for listener in tuple(self._listeners):
            listener(name, old_value, new_value)


class ChangeRecorder:
    """Listener that keeps every change it receives, in order.

    Handy for driving a UI change log and for asserting on notifications.
    """

    def __init__(self) -> None:
        self.changes: list[PropertyChange] = []

    def __call__(self, name: str, old_value: Any, new_value: Any) -> None:
        self.changes.append(PropertyChange(name, old_value, new_value))

    @property
    def names(self) -> list[str]:
        return [change.name for change in self.changes]

    def last(self, name: str) -> PropertyChange | None:
        """Most recent change for a property, or None."""
        for change in reversed(self.changes):
            if change.name == name:
                return change
        return None

    def clear(self) -> None:
        self.changes.clear()
