"""
Tests for target generation, bounds handling and the pyautogui pointer.
"""

import random
import unittest
from types import SimpleNamespace

from green_dot.activity_state import ActivityState, ActivityStateHolder
from green_dot.motion_worker import MotionWorker
from green_dot.pointer import (
    MIN_MOVE_DURATION_SECONDS,
    MotionBounds,
    PointerTarget,
    PyAutoGuiPointer,
    random_target,
    resolve_bounds,
)
from tests.fakes import wait_until


def _fake_backend(size=(800, 600), failsafe_points=()):
    calls = []
    backend = SimpleNamespace(
        FAILSAFE=None,
        FAILSAFE_POINTS=list(failsafe_points),
        easeInOutQuad=object(),
        moveTo=lambda x, y, duration, tween: calls.append((x, y, duration, tween)),
        size=lambda: size,
    )
    return backend, calls


class TestRandomTarget(unittest.TestCase):
    def test_targets_fall_inside_bounds(self):
        bounds = MotionBounds(3, 4)
        rng = random.Random(1234)
        targets = [random_target(bounds, rng) for _ in range(500)]
        self.assertTrue(all(bounds.contains(target) for target in targets))
        # Uniform draws over a 3x4 grid reach every column and row.
        self.assertEqual({t.x for t in targets}, {0, 1, 2})
        self.assertEqual({t.y for t in targets}, {0, 1, 2, 3})

    def test_default_bounds_match_reference_square(self):
        bounds = MotionBounds()
        self.assertEqual((bounds.max_x, bounds.max_y), (1000, 1000))
        self.assertTrue(bounds.contains(random_target(bounds)))

    def test_seeded_generator_is_reproducible(self):
        bounds = MotionBounds()
        first = random_target(bounds, random.Random(99))
        second = random_target(bounds, random.Random(99))
        self.assertEqual(first, second)


class TestMotionBounds(unittest.TestCase):
    def test_rejects_non_positive_bounds(self):
        with self.assertRaises(ValueError):
            MotionBounds(0, 10)
        with self.assertRaises(ValueError):
            MotionBounds(10, -1)

    def test_contains_is_exclusive_at_upper_edge(self):
        bounds = MotionBounds(10, 20)
        self.assertTrue(bounds.contains(PointerTarget(9, 19)))
        self.assertFalse(bounds.contains(PointerTarget(10, 0)))
        self.assertFalse(bounds.contains(PointerTarget(0, -1)))

    def test_clamped_to_screen(self):
        self.assertEqual(MotionBounds(1000, 1000).clamped_to(800, 1200), MotionBounds(800, 1000))


class TestPyAutoGuiPointer(unittest.TestCase):
    def test_move_smooth_uses_duration_and_easing(self):
        backend, calls = _fake_backend()
        pointer = PyAutoGuiPointer(0.25, failsafe=False, backend=backend)
        pointer.move_smooth(10, 20)
        self.assertEqual(calls, [(10, 20, 0.25, backend.easeInOutQuad)])
        self.assertIs(backend.FAILSAFE, False)

    def test_duration_never_drops_to_an_instant_jump(self):
        """pyautogui skips the animation for durations of 0.1 s or less."""
        backend, calls = _fake_backend()
        pointer = PyAutoGuiPointer(0.0, backend=backend)
        pointer.move_smooth(5, 5)
        self.assertEqual(pointer.duration, MIN_MOVE_DURATION_SECONDS)
        self.assertGreater(calls[0][2], 0.1)

    def test_failsafe_corner_targets_are_nudged_inward(self):
        corners = [(0, 0), (0, 599), (799, 0), (799, 599)]
        backend, calls = _fake_backend(failsafe_points=corners)
        pointer = PyAutoGuiPointer(backend=backend)
        for x, y in corners:
            pointer.move_smooth(x, y)
        landed = [(x, y) for x, y, _, _ in calls]
        self.assertEqual(landed, [(1, 1), (1, 598), (798, 1), (798, 598)])

    def test_non_corner_targets_are_untouched(self):
        backend, calls = _fake_backend(failsafe_points=[(0, 0)])
        pointer = PyAutoGuiPointer(backend=backend)
        pointer.move_smooth(0, 10)
        self.assertEqual(calls[0][:2], (0, 10))

    def test_corners_allowed_when_failsafe_disabled(self):
        backend, calls = _fake_backend(failsafe_points=[(0, 0)])
        pointer = PyAutoGuiPointer(failsafe=False, backend=backend)
        pointer.move_smooth(0, 0)
        self.assertEqual(calls[0][:2], (0, 0))

    def test_screen_size(self):
        backend, _ = _fake_backend(size=(1920, 1080))
        self.assertEqual(PyAutoGuiPointer(backend=backend).screen_size(), (1920, 1080))


class TestResolveBounds(unittest.TestCase):
    def test_fixed_bounds_by_default(self):
        backend, _ = _fake_backend(size=(640, 480))
        pointer = PyAutoGuiPointer(backend=backend)
        bounds = MotionBounds()
        self.assertIs(resolve_bounds(bounds, pointer, bound_to_screen=False), bounds)

    def test_clamps_to_screen_when_requested(self):
        backend, _ = _fake_backend(size=(640, 480))
        pointer = PyAutoGuiPointer(backend=backend)
        resolved = resolve_bounds(MotionBounds(), pointer, bound_to_screen=True)
        self.assertEqual(resolved, MotionBounds(640, 480))

    def test_pointer_without_screen_query_keeps_bounds(self):
        bounds = MotionBounds(50, 50)
        self.assertIs(resolve_bounds(bounds, object(), bound_to_screen=True), bounds)

    def test_screen_query_failure_keeps_bounds(self):
        def broken():
            raise OSError("no display")

        pointer = SimpleNamespace(screen_size=broken)
        bounds = MotionBounds(50, 50)
        self.assertIs(resolve_bounds(bounds, pointer, bound_to_screen=True), bounds)


class _CornerTrackingBackend:
    """Mimics pyautogui refusing every move while the pointer rests on a fail-safe point."""

    FAILSAFE = True
    FAILSAFE_POINTS = [(0, 0)]
    easeInOutQuad = object()

    def __init__(self):
        self.position = (500, 500)
        self.moves = 0

    def moveTo(self, x, y, duration, tween):  # noqa: N802
        if self.FAILSAFE and self.position in self.FAILSAFE_POINTS:
            raise RuntimeError("fail-safe triggered")
        self.position = (x, y)
        self.moves += 1


class TestFailsafeCornerWithWorker(unittest.TestCase):
    def test_worker_keeps_moving_when_every_target_is_a_corner(self):
        backend = _CornerTrackingBackend()
        worker = MotionWorker(
            ActivityStateHolder(ActivityState.ACTIVE),
            PyAutoGuiPointer(backend=backend),
            bounds=MotionBounds(1, 1),
            idle_interval=0.01,
            move_interval=0.01,
        )
        self.addCleanup(worker.stop, 2.0)
        worker.start()

        self.assertTrue(wait_until(lambda: worker.cycles >= 10))
        self.assertEqual(worker.failures, 0)
        self.assertEqual(backend.position, (1, 1))


if __name__ == "__main__":
    unittest.main()
