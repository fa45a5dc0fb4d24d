"""
Entry point for the Green Dot application.
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from green_dot import logger as app_logger
from green_dot.app import AppCoordinator
from green_dot.instance_guard import InstanceGuard

_LOGGER = app_logger.get_logger("app")


def main() -> int:
    """Launch the window, tray icon and motion worker."""
    with InstanceGuard() as guard:
        if not guard.acquire():
            _LOGGER.info("Green Dot is already running ({}); exiting.", guard.lock_path)
            return 0

        app = QApplication(sys.argv)
        app.setQuitOnLastWindowClosed(False)
        coordinator = AppCoordinator()
        coordinator.start()
        exit_code = app.exec()
        coordinator.shutdown()
        return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
