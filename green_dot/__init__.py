"""
Green Dot: keeps the session awake by moving the pointer while active.
"""

from .activity_state import ActivityState, ActivityStateHolder  # noqa: F401
from .pointer import MotionBounds, PointerTarget, random_target  # noqa: F401
