"""Fixtures for Bee Catch tests."""
import random

import pygame
import pytest

from games.BeeCatch import config
from games.BeeCatch.assets import SpriteAssets
from games.BeeCatch.game_mode import BeeCatchMode
from games.BeeCatch.tests.catch_helpers import FakeClock, press

# Sprite sizes; hit boxes are half of these
BEE_SPRITE = (40, 30)
HORNET_SPRITE = (50, 40)


@pytest.fixture
def assets() -> SpriteAssets:
    """Plain surfaces standing in for the decoded images."""
    return SpriteAssets(
        bee=pygame.Surface(BEE_SPRITE),
        hornet=pygame.Surface(HORNET_SPRITE),
        forest=pygame.Surface((200, 150)),
    )


@pytest.fixture
def rules():
    """Classic rules."""
    return config.DEFAULT_RULES


@pytest.fixture
def quiet_rules():
    """Classic rules with spawning switched off, for hand-placed entities."""
    return config.DEFAULT_RULES.model_copy(update={'spawn_chance': 0.0})


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def game(assets, quiet_rules, clock) -> BeeCatchMode:
    """A game with no random spawns, not yet started."""
    return BeeCatchMode(assets, rules=quiet_rules, rng=random.Random(1),
                        clock=clock, fx_rng=random.Random(2))


@pytest.fixture
def playing_game(game) -> BeeCatchMode:
    """A game that has received its first press."""
    game.step(press(400, 300))
    return game
