"""
Helpers for enforcing per-move time limits.

The clock is passive: nothing runs in the background. Whoever owns the
event loop starts it and polls it, then ends the game when it expires.
"""

import math
import time
from typing import Callable, Optional


def deadline_after(seconds: float, now: Optional[float] = None) -> float:
    return (time.monotonic() if now is None else now) + seconds


class MoveClock:
    """
    A deadline for one move.

    Args:
        limit_seconds: Time allowed for the move.
        clock: Returns the current time in seconds. Defaults to
            time.monotonic; tests pass a fake.
    """

    def __init__(self, limit_seconds: float, clock: Optional[Callable[[], float]] = None):
        if limit_seconds <= 0:
            raise ValueError("limit_seconds must be positive")
        self.limit_seconds = limit_seconds
        self._clock = clock or time.monotonic
        self._deadline: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._deadline is not None

    def start(self) -> "MoveClock":
        """Start (or restart) the countdown."""
        self._deadline = deadline_after(self.limit_seconds, self._clock())
        return self

    def stop(self):
        self._deadline = None

    def time_remaining(self) -> Optional[float]:
        """Seconds left, never below zero. None when the clock is stopped."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def seconds_left(self) -> Optional[int]:
        """Whole seconds left, rounded up, for a countdown display."""
        remaining = self.time_remaining()
        if remaining is None:
            return None
        return math.ceil(remaining)

    def expired(self) -> bool:
        """True once a running clock has passed its deadline."""
        return self._deadline is not None and self._clock() >= self._deadline
