"""
Single-instance guard so two copies never fight over the pointer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QDir, QLockFile

DEFAULT_LOCK_PATH = Path(QDir.tempPath()) / "green_dot.lock"


class InstanceGuard:
    """
    Holds a ``QLockFile`` for the lifetime of the process.

    A lock left behind by a crashed instance is considered stale once its
    owning process is gone, and is then taken over.
    """

    def __init__(self, lock_path: Optional[Path] = None) -> None:
        self.lock_path = Path(lock_path or DEFAULT_LOCK_PATH)
        self._lock = QLockFile(str(self.lock_path))

    def acquire(self) -> bool:
        return self._lock.tryLock(0)

    def release(self) -> None:
        if self._lock.isLocked():
            self._lock.unlock()

    def __enter__(self) -> "InstanceGuard":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()
