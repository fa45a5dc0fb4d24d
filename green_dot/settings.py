"""
QSettings-backed configuration for Green Dot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from PySide6.QtCore import QSettings

from green_dot import logger as app_logger
from green_dot.pointer import (
    DEFAULT_MAX_X,
    DEFAULT_MAX_Y,
    DEFAULT_MOVE_DURATION_SECONDS,
    MIN_MOVE_DURATION_SECONDS,
    MotionBounds,
)

ORGANIZATION = "GreenDot"
APPLICATION = "GreenDot"

DEFAULT_IDLE_INTERVAL_SECONDS = 1.0
DEFAULT_MOVE_INTERVAL_SECONDS = 3.0

_LOGGER = app_logger.get_logger("settings")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(eq=True)
class GreenDotSettings:
    idle_interval_seconds: float = DEFAULT_IDLE_INTERVAL_SECONDS
    move_interval_seconds: float = DEFAULT_MOVE_INTERVAL_SECONDS
    move_duration_seconds: float = DEFAULT_MOVE_DURATION_SECONDS
    max_x: int = DEFAULT_MAX_X
    max_y: int = DEFAULT_MAX_Y
    bound_to_screen: bool = False
    start_active: bool = False
    failsafe: bool = True

    @property
    def bounds(self) -> MotionBounds:
        return MotionBounds(self.max_x, self.max_y)


class SettingsManager:
    """Loads persisted settings and clamps invalid data."""

    def __init__(self, *, store: Optional[QSettings] = None) -> None:
        self._store = store if store is not None else QSettings(ORGANIZATION, APPLICATION)

    def read_settings(self) -> GreenDotSettings:
        return GreenDotSettings(
            idle_interval_seconds=self._read_float("IdleIntervalSeconds", DEFAULT_IDLE_INTERVAL_SECONDS, 0.05, 60.0),
            move_interval_seconds=self._read_float("MoveIntervalSeconds", DEFAULT_MOVE_INTERVAL_SECONDS, 0.05, 600.0),
            move_duration_seconds=self._read_float(
                "MoveDurationSeconds", DEFAULT_MOVE_DURATION_SECONDS, MIN_MOVE_DURATION_SECONDS, 10.0
            ),
            max_x=self._read_int("MaxX", DEFAULT_MAX_X, 1, 100_000),
            max_y=self._read_int("MaxY", DEFAULT_MAX_Y, 1, 100_000),
            bound_to_screen=self._read_bool("BoundToScreen", False),
            start_active=self._read_bool("StartActive", False),
            failsafe=self._read_bool("Failsafe", True),
        )

    def write_settings(self, settings: GreenDotSettings) -> None:
        self._store.setValue("IdleIntervalSeconds", settings.idle_interval_seconds)
        self._store.setValue("MoveIntervalSeconds", settings.move_interval_seconds)
        self._store.setValue("MoveDurationSeconds", settings.move_duration_seconds)
        self._store.setValue("MaxX", settings.max_x)
        self._store.setValue("MaxY", settings.max_y)
        self._store.setValue("BoundToScreen", settings.bound_to_screen)
        self._store.setValue("StartActive", settings.start_active)
        self._store.setValue("Failsafe", settings.failsafe)
        self._store.sync()

    def _raw(self, name: str) -> Any:
        if not self._store.contains(name):
            return None
        return self._store.value(name)

    def _read_bool(self, name: str, default: bool) -> bool:
        raw = self._raw(name)
        if raw is None:
            return default
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        _LOGGER.warning("Setting {} has unexpected value {!r}; using {}.", name, raw, default)
        return default

    def _read_float(self, name: str, default: float, minimum: float, maximum: float) -> float:
        raw = self._raw(name)
        if raw is None:
            return default
        try:
            value = float(raw)
        except (TypeError, ValueError):
            _LOGGER.warning("Setting {} has unexpected value {!r}; using {}.", name, raw, default)
            return default
        return self._clamp(name, value, minimum, maximum)

    def _read_int(self, name: str, default: int, minimum: int, maximum: int) -> int:
        raw = self._raw(name)
        if raw is None:
            return default
        try:
            value = int(raw)
        except (TypeError, ValueError):
            _LOGGER.warning("Setting {} has unexpected value {!r}; using {}.", name, raw, default)
            return default
        return int(self._clamp(name, value, minimum, maximum))

    @staticmethod
    def _clamp(name: str, value, minimum, maximum):
        if value < minimum or value > maximum:
            _LOGGER.warning(
                "Invalid {} value {} found in settings. Clamping to safe bounds.",
                name,
                value,
            )
        return max(minimum, min(maximum, value))
