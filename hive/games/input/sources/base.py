"""Interface for anything that produces InputEvents."""
from abc import ABC, abstractmethod
from typing import List

from hive.games.input.input_event import InputEvent


class InputSource(ABC):
    """Collects presses in update() and hands them out in poll_events()."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Gather new presses; called once per frame."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Return and forget the presses gathered so far."""
