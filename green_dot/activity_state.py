"""
Activity state shared between the UI thread and the motion worker.
"""

from __future__ import annotations

import threading
from enum import Enum


class ActivityState(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @property
    def is_active(self) -> bool:
        return self is ActivityState.ACTIVE

    def toggled(self) -> "ActivityState":
        return ActivityState.INACTIVE if self.is_active else ActivityState.ACTIVE

    @property
    def action_label(self) -> str:
        """Caption for the control that flips away from this state."""
        return "Stop" if self.is_active else "Start"

    @classmethod
    def from_bool(cls, active: bool) -> "ActivityState":
        return cls.ACTIVE if active else cls.INACTIVE


class ActivityStateHolder:
    """
    Lock-protected holder for the current ActivityState.

    One instance is handed to both the controller (writer) and the motion
    worker (reader). Every access goes through the lock, so a toggle is an
    atomic read-modify-write and readers always see a committed value.
    """

    def __init__(self, initial: ActivityState = ActivityState.INACTIVE) -> None:
        self._lock = threading.Lock()
        self._state = initial

    def get(self) -> ActivityState:
        with self._lock:
            return self._state

    def set(self, state: ActivityState) -> ActivityState:
        """Store ``state`` and return the previous value."""
        with self._lock:
            previous = self._state
            self._state = state
            return previous

    def toggle(self) -> ActivityState:
        with self._lock:
            self._state = self._state.toggled()
            return self._state

    @property
    def is_active(self) -> bool:
        return self.get().is_active
