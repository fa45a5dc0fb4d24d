"""
Small fixed-size window holding the Start/Stop button.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from green_dot.activity_state import ActivityState

WINDOW_TITLE = "Green Dot"
WINDOW_WIDTH = 200
WINDOW_HEIGHT = 100
TOGGLE_SHORTCUT = "Ctrl+G"


class ToggleWindow(QWidget):
    toggleRequested = Signal(str)
    closeRequested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self._button = QPushButton(ActivityState.INACTIVE.action_label)
        self._button.setToolTip(f"Toggle pointer activity ({TOGGLE_SHORTCUT})")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.addWidget(self._button)

        # Qt maps Ctrl to Cmd on macOS, matching the platform's default modifier.
        self._shortcut = QShortcut(QKeySequence(TOGGLE_SHORTCUT), self)

        self._button.clicked.connect(lambda: self.toggleRequested.emit("button"))  # type: ignore[arg-type]
        self._shortcut.activated.connect(  # type: ignore[arg-type]
            lambda: self.toggleRequested.emit(f"shortcut {TOGGLE_SHORTCUT}")
        )

    def show_state(self, state: ActivityState) -> None:
        """Relabel the button for the action that flips away from ``state``."""
        self._button.setText(state.action_label)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self.closeRequested.emit()
        super().closeEvent(event)
