"""
Bee Catch - Configuration.

Loads settings from a .env file in the game directory, with defaults that
match the classic game. Real environment variables win over the .env file.
"""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

from models import RulesConfig

# Find the game directory (where this config.py lives)
GAME_DIR = Path(__file__).parent

_env_path = GAME_DIR / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 600)
FPS: int = _get_int('FPS', 60)
WINDOW_TITLE = "Bee Catching Game"

# Round
GAME_TIME: int = _get_int('GAME_TIME', 60)  # Seconds

# Spawning
SPAWN_CHANCE: float = _get_float('SPAWN_CHANCE', 0.05)  # Per tick
MAX_BEES: int = _get_int('MAX_BEES', 10)
HORNET_CHANCE: float = _get_float('HORNET_CHANCE', 0.2)
HIGH_SPEED_CHANCE: float = _get_float('HIGH_SPEED_CHANCE', 0.1)

# Movement (pixels per tick)
NORMAL_SPEED: float = _get_float('NORMAL_SPEED', 2.0)
HIGH_SPEED: float = _get_float('HIGH_SPEED', 5.0)

# Scoring
MAX_HORNETS: int = _get_int('MAX_HORNETS', 3)
BEE_POINTS: int = _get_int('BEE_POINTS', 1)
HIGH_SPEED_BEE_POINTS: int = _get_int('HIGH_SPEED_BEE_POINTS', 3)

# Lightning effect after a hornet hit
LIGHTNING_TICKS: int = _get_int('LIGHTNING_TICKS', 30)
LIGHTNING_BOLTS: int = _get_int('LIGHTNING_BOLTS', 10)

# Assets
ASSETS_DIR = Path(os.getenv('ASSETS_DIR', str(GAME_DIR / 'image')))
BEE_IMAGE = 'bee.png'
HORNET_IMAGE = 'hornet.png'
FOREST_IMAGE = 'forest.jpg'

# Text (fixed width font, used for centering)
CHAR_WIDTH: int = _get_int('CHAR_WIDTH', 7)
FONT_SIZE: int = _get_int('FONT_SIZE', 13)
SHADOW_OFFSET = 1

# Colors (RGBA, not configurable via .env)
TEXT_COLOR: Tuple[int, int, int, int] = (255, 255, 255, 255)
SHADOW_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 255)
FOREST_TINT: Tuple[int, int, int, int] = (0, 100, 0, 40)  # Semi-transparent green
LIGHTNING_COLOR: Tuple[int, int, int, int] = (255, 255, 0, 192)

DEFAULT_RULES = RulesConfig(
    screen_width=SCREEN_WIDTH,
    screen_height=SCREEN_HEIGHT,
    game_time=GAME_TIME,
    spawn_chance=SPAWN_CHANCE,
    max_bees=MAX_BEES,
    hornet_chance=HORNET_CHANCE,
    high_speed_chance=HIGH_SPEED_CHANCE,
    normal_speed=NORMAL_SPEED,
    high_speed=HIGH_SPEED,
    max_hornets=MAX_HORNETS,
    bee_points=BEE_POINTS,
    high_speed_bee_points=HIGH_SPEED_BEE_POINTS,
    lightning_ticks=LIGHTNING_TICKS,
    lightning_bolts=LIGHTNING_BOLTS,
)
