"""Phase of a round, as seen by the entry points."""
from enum import Enum


class GameState(Enum):
    """Where a game is in its round.

    NOT_STARTED is the title screen waiting for the first press. PLAYING is
    the round itself. GAME_OVER shows the result until the next press.
    """
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"
