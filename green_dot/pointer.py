"""
Pointer target generation and the smooth-move platform primitive.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple

from green_dot import logger as app_logger

DEFAULT_MAX_X = 1000
DEFAULT_MAX_Y = 1000
DEFAULT_MOVE_DURATION_SECONDS = 0.5
# pyautogui jumps instead of animating at or below its 0.1 s MINIMUM_DURATION.
MIN_MOVE_DURATION_SECONDS = 0.2


@dataclass(frozen=True)
class PointerTarget:
    x: int
    y: int


@dataclass(frozen=True)
class MotionBounds:
    """Exclusive upper bounds for generated targets; the lower bound is 0."""

    max_x: int = DEFAULT_MAX_X
    max_y: int = DEFAULT_MAX_Y

    def __post_init__(self) -> None:
        if self.max_x <= 0 or self.max_y <= 0:
            raise ValueError(f"Motion bounds must be positive, got {self.max_x}x{self.max_y}")

    def contains(self, target: PointerTarget) -> bool:
        return 0 <= target.x < self.max_x and 0 <= target.y < self.max_y

    def clamped_to(self, width: int, height: int) -> "MotionBounds":
        return MotionBounds(max(1, min(self.max_x, width)), max(1, min(self.max_y, height)))


class Pointer(Protocol):
    def move_smooth(self, x: int, y: int) -> None:
        ...


def random_target(bounds: MotionBounds, rng: Optional[random.Random] = None) -> PointerTarget:
    """Draw x and y independently and uniformly from ``[0, max)``."""
    source = rng or random
    return PointerTarget(source.randrange(bounds.max_x), source.randrange(bounds.max_y))


class PyAutoGuiPointer:
    """
    Moves the system pointer with pyautogui, interpolating along an
    ease-in-out curve so the motion resembles a hand on the mouse.

    ``backend`` defaults to the ``pyautogui`` module, imported on first use
    because it needs a display connection at import time.
    """

    def __init__(
        self,
        duration: float = DEFAULT_MOVE_DURATION_SECONDS,
        *,
        failsafe: bool = True,
        backend: Any = None,
    ) -> None:
        self.duration = max(duration, MIN_MOVE_DURATION_SECONDS)
        self.failsafe = failsafe
        self._backend = backend

    @property
    def backend(self) -> Any:
        if self._backend is None:
            import pyautogui

            self._backend = pyautogui
        self._backend.FAILSAFE = self.failsafe
        return self._backend

    def move_smooth(self, x: int, y: int) -> None:
        """Move to absolute (x, y); blocks until the motion completes."""
        backend = self.backend
        x, y = self._avoid_failsafe_points(backend, x, y)
        backend.moveTo(x, y, duration=self.duration, tween=backend.easeInOutQuad)

    def _avoid_failsafe_points(self, backend: Any, x: int, y: int) -> Tuple[int, int]:
        """
        Step one pixel inward from a fail-safe corner.

        pyautogui lets a move land on a ``FAILSAFE_POINTS`` entry but raises
        ``FailSafeException`` on every later move while the pointer rests there.
        """
        if not backend.FAILSAFE:
            return x, y
        points = {tuple(point) for point in getattr(backend, "FAILSAFE_POINTS", ())}
        if (x, y) not in points:
            return x, y
        nudged_x = x + 1 if x == 0 else x - 1
        nudged_y = y + 1 if y == 0 else y - 1
        app_logger.get_logger("pointer").debug("Target ({}, {}) is a fail-safe point; using ({}, {})", x, y, nudged_x, nudged_y)
        return nudged_x, nudged_y

    def screen_size(self) -> Tuple[int, int]:
        width, height = self.backend.size()
        return int(width), int(height)


def resolve_bounds(bounds: MotionBounds, pointer: Any, *, bound_to_screen: bool) -> MotionBounds:
    """
    Return ``bounds``, optionally clamped to the primary screen.

    Pointers without a ``screen_size`` method, or a screen query that fails,
    leave the configured bounds untouched.
    """
    if not bound_to_screen:
        return bounds
    screen_size = getattr(pointer, "screen_size", None)
    if screen_size is None:
        return bounds
    try:
        width, height = screen_size()
    except Exception as exc:  # pyautogui surfaces display errors as assorted types
        app_logger.get_logger("pointer").warning("Could not query screen size; keeping {}x{}: {}", bounds.max_x, bounds.max_y, exc)
        return bounds
    resolved = bounds.clamped_to(width, height)
    app_logger.get_logger("pointer").info("Motion bounds clamped to screen: {}x{}", resolved.max_x, resolved.max_y)
    return resolved
