"""
Score tracking for Bee Catch.

ScoreTracker uses an immutable state pattern: every record_* call returns
a new tracker and leaves the original untouched.

Examples:
    >>> tracker = ScoreTracker(max_hornets=3)
    >>> tracker = tracker.record_bee(points=1).record_bee(points=3)
    >>> tracker.score
    4
    >>> tracker.record_hornet().hornets_hit
    1
"""

from typing import Optional

from models import ScoreData


class ScoreTracker:
    """Tracks score and hornet penalties for one round.

    Attributes:
        _data: Internal ScoreData model (immutable)
        _max_hornets: Hornet hits that end the round
    """

    def __init__(self, max_hornets: int, data: Optional[ScoreData] = None):
        """Initialize score tracker.

        Args:
            max_hornets: Number of hornet hits that end the round
            data: Initial score data. If None, starts with zeros.
        """
        self._max_hornets = max_hornets
        self._data = data if data is not None else ScoreData()

    def record_bee(self, points: int) -> 'ScoreTracker':
        """Record a caught bee worth `points`.

        Returns:
            New ScoreTracker with score and bees_caught updated
        """
        return ScoreTracker(self._max_hornets, ScoreData(
            score=self._data.score + points,
            bees_caught=self._data.bees_caught + 1,
            hornets_hit=self._data.hornets_hit,
        ))

    def record_hornet(self) -> 'ScoreTracker':
        """Record a clicked hornet.

        The penalty count never goes past max_hornets.

        Returns:
            New ScoreTracker with hornets_hit updated, score unchanged
        """
        return ScoreTracker(self._max_hornets, ScoreData(
            score=self._data.score,
            bees_caught=self._data.bees_caught,
            hornets_hit=min(self._data.hornets_hit + 1, self._max_hornets),
        ))

    def reset(self) -> 'ScoreTracker':
        """Return a tracker with all counters at zero."""
        return ScoreTracker(self._max_hornets)

    @property
    def score(self) -> int:
        return self._data.score

    @property
    def hornets_hit(self) -> int:
        return self._data.hornets_hit

    @property
    def max_hornets(self) -> int:
        return self._max_hornets

    @property
    def is_out_of_lives(self) -> bool:
        """True once the hornet limit has been reached."""
        return self._data.hornets_hit >= self._max_hornets

    def get_stats(self) -> ScoreData:
        """Get current score data."""
        return self._data

    def get_hornets_text(self) -> str:
        """HUD text for the penalty counter, e.g. "Hornets: 1/3"."""
        return f"Hornets: {self._data.hornets_hit}/{self._max_hornets}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"ScoreTracker({self._data!r}, max_hornets={self._max_hornets})"

    def __str__(self) -> str:
        return str(self._data.score)
