"""Frame-by-frame access to the active input source."""
from typing import List, Optional

from hive.games.input.input_event import InputEvent
from hive.games.input.sources.base import InputSource


class InputManager:
    """Owns the active input source.

    The main loop calls update() once per frame and then hands
    get_events() to the game. With no source attached both are no-ops.
    """

    def __init__(self, source: Optional[InputSource] = None):
        self.source = source

    def update(self, dt: float) -> None:
        if self.source is not None:
            self.source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events gathered since the last call; each is returned once."""
        if self.source is None:
            return []
        return self.source.poll_events()

    def clear_events(self) -> None:
        """Drop anything the source has queued."""
        self.get_events()
