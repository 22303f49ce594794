"""
Visual effects and round timing for Bee Catch.

LightningEffect counts frames, RoundTimer counts wall-clock seconds.
"""
import time
from typing import Callable, Optional


class LightningEffect:
    """Lightning flash shown after a hornet hit.

    Counts down in ticks rather than seconds, matching the frame-stepped
    game loop.
    """

    def __init__(self, duration_ticks: int):
        self._duration = duration_ticks
        self.active = False
        self.ticks_left = 0

    def trigger(self) -> None:
        """Switch the effect on for the full duration (restarts if running)."""
        self.active = True
        self.ticks_left = self._duration

    def update(self) -> None:
        """Advance one tick, switching off when the countdown runs out."""
        if not self.active:
            return
        self.ticks_left -= 1
        if self.ticks_left <= 0:
            self.active = False

    def reset(self) -> None:
        self.active = False
        self.ticks_left = 0


class RoundTimer:
    """Whole seconds left in a round, measured from a start timestamp.

    Args:
        duration: Round length in seconds
        clock: Returns the current time in seconds (time.monotonic by default)
    """

    def __init__(self, duration: int, clock: Callable[[], float] = time.monotonic):
        self._duration = duration
        self._clock = clock
        self._start: Optional[float] = None
        self.remaining = duration

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def started(self) -> bool:
        return self._start is not None

    def start(self) -> None:
        """Record the start time and refill the round."""
        self._start = self._clock()
        self.remaining = self._duration

    def update(self) -> int:
        """Recompute and return the seconds left, clamped at zero.

        Elapsed time is truncated to whole seconds before subtracting.
        """
        if self._start is None:
            return self.remaining
        elapsed = int(self._clock() - self._start)
        self.remaining = max(0, self._duration - elapsed)
        return self.remaining

    @property
    def expired(self) -> bool:
        return self.started and self.remaining <= 0
