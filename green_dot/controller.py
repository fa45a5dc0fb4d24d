"""
Activity controller translating UI toggle requests into state transitions.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from green_dot import logger as app_logger
from green_dot.activity_state import ActivityState, ActivityStateHolder


class ActivityController(QObject):
    """
    Owns the writer side of the shared :class:`ActivityStateHolder`.

    ``stateChanged`` is emitted after every committed transition so the
    window, tray menu and tooltip can relabel themselves. The controller
    knows nothing about how motion is performed.
    """

    stateChanged = Signal(object)

    def __init__(self, state: Optional[ActivityStateHolder] = None) -> None:
        super().__init__()
        self._state = state if state is not None else ActivityStateHolder()
        self._logger = app_logger.get_logger("controller")

    @property
    def state_holder(self) -> ActivityStateHolder:
        return self._state

    def current_state(self) -> ActivityState:
        return self._state.get()

    def toggle(self, source: str = "button") -> ActivityState:
        """Flip the activity state and return the new value."""
        new_state = self._state.toggle()
        self._log_transition(new_state, source)
        self.stateChanged.emit(new_state)
        return new_state

    def set_active(self, active: bool, source: str = "settings") -> ActivityState:
        target = ActivityState.from_bool(active)
        previous = self._state.set(target)
        if previous is not target:
            self._log_transition(target, source)
            self.stateChanged.emit(target)
        return target

    def _log_transition(self, state: ActivityState, source: str) -> None:
        verb = "started" if state.is_active else "stopped"
        self._logger.info("Application {} with {}", verb, source)
