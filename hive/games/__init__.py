"""Game interface shared by Hive games: GameState, BaseGame and input."""

from hive.games.game_state import GameState
from hive.games.base_game import BaseGame

__all__ = ['GameState', 'BaseGame']
