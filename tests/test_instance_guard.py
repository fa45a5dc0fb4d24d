"""
Tests for the single-instance lock.
"""

import tempfile
import unittest
from pathlib import Path

from green_dot.instance_guard import InstanceGuard


class TestInstanceGuard(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.lock_path = Path(self._tmp.name) / "green_dot.lock"

    def test_second_guard_is_refused_while_first_holds_lock(self):
        first = InstanceGuard(self.lock_path)
        second = InstanceGuard(self.lock_path)
        self.addCleanup(first.release)
        self.addCleanup(second.release)

        self.assertTrue(first.acquire())
        self.assertFalse(second.acquire())

    def test_lock_is_available_again_after_release(self):
        with InstanceGuard(self.lock_path) as guard:
            self.assertTrue(guard.acquire())
        self.assertFalse(self.lock_path.exists())

        again = InstanceGuard(self.lock_path)
        self.addCleanup(again.release)
        self.assertTrue(again.acquire())

    def test_release_without_acquire_is_harmless(self):
        InstanceGuard(self.lock_path).release()
        self.assertFalse(self.lock_path.exists())


if __name__ == "__main__":
    unittest.main()
