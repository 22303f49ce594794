"""Interface every Hive game implements.

An entry point only needs this class to run a game: it passes the frame's
input events to handle_input, calls update once per frame and then lets the
game render itself. Metadata and command line options are plain class
attributes so launchers can read them without building a game.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from hive.games.game_state import GameState
from hive.logging import get_logger

log = get_logger('base_game')

# argparse option shared by every game
SEED_ARGUMENT: Dict[str, Any] = {
    'name': '--seed',
    'type': int,
    'default': None,
    'help': 'Random seed for reproducible spawns',
}


class BaseGame(ABC):
    """Abstract Hive game.

    Class attributes:
        NAME, DESCRIPTION, VERSION, AUTHOR: Shown by launchers
        ARGUMENTS: argparse option dicts ('name' plus add_argument keywords)

    Subclasses report their phase through _get_internal_state(); callers
    read it from the state property.
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = ""
    VERSION: str = "0.0.0"
    AUTHOR: str = "Unknown"

    ARGUMENTS: List[Dict[str, Any]] = []

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """The game's own options followed by the shared ones.

        A game option with the same name as a shared one replaces it.
        """
        own = {arg['name'] for arg in cls.ARGUMENTS}
        shared = [arg for arg in (SEED_ARGUMENT,) if arg['name'] not in own]
        return list(cls.ARGUMENTS) + shared

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    def state(self) -> GameState:
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        ...

    @abstractmethod
    def get_score(self) -> int:
        ...

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Take this frame's InputEvents."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance one frame; dt is the frame time in seconds."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        ...

    def reset(self) -> None:
        """Return to the title screen. Games extend this."""
        log.debug("%s reset", self.NAME)
