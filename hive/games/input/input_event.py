"""A single pointer press delivered to a game."""
from dataclasses import dataclass

from models import Vector2D, EventType


@dataclass(frozen=True)
class InputEvent:
    """One press, in screen coordinates.

    Attributes:
        position: Where the press landed
        timestamp: time.monotonic() seconds when it happened
        event_type: HIT for presses the game should hit-test
    """
    position: Vector2D
    timestamp: float
    event_type: EventType = EventType.HIT

    def __post_init__(self):
        if self.timestamp < 0:
            raise ValueError(f"timestamp must be non-negative, got {self.timestamp}")

    def __str__(self) -> str:
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, type={self.event_type.value})")
