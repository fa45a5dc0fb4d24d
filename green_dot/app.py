"""
Application coordinator wiring the window, tray icon, controller and worker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject
from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

from green_dot import logger as app_logger
from green_dot.activity_state import ActivityState
from green_dot.controller import ActivityController
from green_dot.motion_worker import MotionWorker
from green_dot.pointer import Pointer, PyAutoGuiPointer, resolve_bounds
from green_dot.settings import GreenDotSettings, SettingsManager
from green_dot.toggle_window import WINDOW_TITLE, ToggleWindow

APP_NAME = WINDOW_TITLE
APP_VERSION = "1.0.0"
ASSETS_DIR = Path(__file__).resolve().parent / "assets"
TRAY_ICON_PATH = ASSETS_DIR / "green_dot.png"
# Bounded wait for an in-flight motion to finish when quitting.
SHUTDOWN_JOIN_SECONDS = 5.0


@dataclass
class AppCoordinator(QObject):
    settings_manager: SettingsManager = field(default_factory=SettingsManager)
    pointer: Optional[Pointer] = None

    def __post_init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger("app")
        self._settings: GreenDotSettings = self.settings_manager.read_settings()
        self._shutdown_requested = False

        if self.pointer is None:
            self.pointer = PyAutoGuiPointer(
                self._settings.move_duration_seconds,
                failsafe=self._settings.failsafe,
            )

        self._controller = ActivityController()
        self._worker = MotionWorker(
            self._controller.state_holder,
            self.pointer,
            bounds=resolve_bounds(
                self._settings.bounds,
                self.pointer,
                bound_to_screen=self._settings.bound_to_screen,
            ),
            idle_interval=self._settings.idle_interval_seconds,
            move_interval=self._settings.move_interval_seconds,
        )

        self._window = ToggleWindow()
        self._window.setWindowIcon(self._load_icon())
        self._window.toggleRequested.connect(self._controller.toggle)
        self._window.closeRequested.connect(self.shutdown)

        self._tray = QSystemTrayIcon(self)
        self._tray.setIcon(self._window.windowIcon())

        menu = QMenu()
        show_action = QAction("Show", menu)
        self._toggle_action = QAction(ActivityState.INACTIVE.action_label, menu)
        exit_action = QAction("Exit", menu)
        menu.addAction(show_action)
        menu.addAction(self._toggle_action)
        menu.addSeparator()
        menu.addAction(exit_action)
        self._tray.setContextMenu(menu)
        self._tray_menu = menu

        show_action.triggered.connect(self._show_window)
        self._toggle_action.triggered.connect(lambda: self._controller.toggle("tray menu"))
        exit_action.triggered.connect(self.shutdown)

        self._controller.stateChanged.connect(self._on_state_changed)
        self._on_state_changed(self._controller.current_state())

    @property
    def controller(self) -> ActivityController:
        return self._controller

    @property
    def worker(self) -> MotionWorker:
        return self._worker

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested

    def start(self) -> None:
        self._logger.info("Warming up {} v{}", APP_NAME, APP_VERSION)
        self._worker.start()
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray.show()
        else:
            self._logger.warning("System tray unavailable; running with the window only.")
        self._window.show()
        if self._settings.start_active:
            self._controller.set_active(True, source="start-active setting")

    def shutdown(self) -> None:
        if self._shutdown_requested:
            return
        self._logger.info("Shutting down application on user request.")
        self._shutdown_requested = True
        self._controller.set_active(False, source="shutdown")
        if not self._worker.stop(timeout=SHUTDOWN_JOIN_SECONDS):
            self._logger.warning("Motion worker still finishing a move; leaving it to process exit.")
        self._tray.hide()
        self._window.hide()
        QApplication.instance().quit()

    def _on_state_changed(self, state: ActivityState) -> None:
        self._window.show_state(state)
        self._toggle_action.setText(state.action_label)
        self._tray.setToolTip(f"{APP_NAME} v{APP_VERSION} ({state.value})")

    def _show_window(self) -> None:
        self._window.show()
        self._window.raise_()
        self._window.activateWindow()

    def _load_icon(self) -> QIcon:
        if TRAY_ICON_PATH.exists():
            icon = QIcon(str(TRAY_ICON_PATH))
            if not icon.isNull():
                return icon
        self._logger.warning("Failed to load application icon from {}; using default.", TRAY_ICON_PATH)
        return QApplication.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon)
