"""
Background worker that moves the pointer while activity is enabled.
"""

from __future__ import annotations

import random
import threading
from typing import Optional

from green_dot import logger as app_logger
from green_dot.activity_state import ActivityStateHolder
from green_dot.pointer import MotionBounds, Pointer, PointerTarget, random_target
from green_dot.settings import DEFAULT_IDLE_INTERVAL_SECONDS, DEFAULT_MOVE_INTERVAL_SECONDS


class MotionWorker:
    """
    Single long-lived thread cycling between two behaviours.

    While the shared state is active it runs motion cycles: pick a random
    target, move there smoothly, then wait ``move_interval`` seconds. While
    inactive it waits ``idle_interval`` seconds before checking again, so an
    activation is observed at most one idle interval late.

    The loop is level-triggered: the state is read once per cycle boundary,
    and a toggle reverted before that read is never seen. All waits happen on
    the stop event, which makes :meth:`stop` take effect at the next cycle
    boundary without interrupting a motion in flight.
    """

    def __init__(
        self,
        state: ActivityStateHolder,
        pointer: Pointer,
        *,
        bounds: Optional[MotionBounds] = None,
        idle_interval: float = DEFAULT_IDLE_INTERVAL_SECONDS,
        move_interval: float = DEFAULT_MOVE_INTERVAL_SECONDS,
        rng: Optional[random.Random] = None,
    ) -> None:
        if idle_interval <= 0 or move_interval <= 0:
            raise ValueError("Worker intervals must be positive.")
        self._state = state
        self._pointer = pointer
        self.bounds = bounds or MotionBounds()
        self.idle_interval = idle_interval
        self.move_interval = move_interval
        self._rng = rng or random.Random()
        self._logger = app_logger.get_logger("worker")

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._cycles = 0
        self._failures = 0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def cycles(self) -> int:
        """Number of motion cycles whose pointer move completed without error."""
        return self._cycles

    @property
    def failures(self) -> int:
        return self._failures

    def start(self) -> None:
        """Launch the worker thread. A stopped worker may be started again."""
        if self.is_running:
            raise RuntimeError("Motion worker is already running.")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="green-dot-motion", daemon=True)
        self._thread.start()
        self._logger.debug(
            "Motion worker started (idle={}s, move={}s, bounds={}x{})",
            self.idle_interval,
            self.move_interval,
            self.bounds.max_x,
            self.bounds.max_y,
        )

    def stop(self, timeout: Optional[float] = None) -> bool:
        """
        Ask the loop to exit at its next cycle boundary.

        Never blocks unless ``timeout`` is given, in which case the thread is
        joined for at most that long. Returns True once the loop has exited.
        """
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return True
        if timeout is not None and thread is not threading.current_thread():
            thread.join(timeout)
        return not thread.is_alive()

    def _run(self) -> None:
        was_active = False
        while not self._stop_event.is_set():
            active = self._state.is_active
            if active != was_active:
                self._logger.info("Motion worker {}", "resumed" if active else "paused")
                was_active = active

            if active:
                self._move_once()
                self._stop_event.wait(self.move_interval)
            else:
                self._stop_event.wait(self.idle_interval)
        self._logger.debug("Motion worker exited after {} cycles.", self._cycles)

    def _move_once(self) -> None:
        target: PointerTarget = random_target(self.bounds, self._rng)
        self._logger.debug("Moving cursor to ({}, {})", target.x, target.y)
        try:
            self._pointer.move_smooth(target.x, target.y)
        except Exception:
            # Skip this cycle; the next one is scheduled as usual.
            self._failures += 1
            self._logger.exception("Pointer move to ({}, {}) failed.", target.x, target.y)
            return
        self._cycles += 1
