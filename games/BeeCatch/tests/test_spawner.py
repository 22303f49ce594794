"""
Tests for BeeSpawner.

Uses scripted random generators to pin each draw, and seeded ones for
statistical properties.
"""

import random
from typing import List

import pytest

from models import EntityKind, SpeedTier
from games.BeeCatch import config
from games.BeeCatch.spawner import BeeSpawner
from games.BeeCatch.tests.catch_helpers import make_bee

SIZES = {EntityKind.BEE: (20, 15), EntityKind.HORNET: (25, 20)}


class ScriptedRandom(random.Random):
    """Random generator returning scripted values for random() and randrange()."""

    def __init__(self, floats: List[float], ints: List[int] = ()):
        super().__init__(0)
        self._floats = list(floats)
        self._ints = list(ints)

    def random(self) -> float:
        return self._floats.pop(0)

    def randrange(self, *args, **kwargs) -> int:
        return self._ints.pop(0)


class TestSpawnRoll:
    """Test the per-tick spawn decision."""

    def test_roll_below_chance_spawns(self, rules):
        """A roll under spawn_chance adds one entity."""
        rng = ScriptedRandom([0.01, 0.9, 0.9, 0.5, 0.5], [10, 20])
        spawner = BeeSpawner(rules, SIZES, rng)
        bees = []

        spawned = spawner.update(bees)

        assert spawned is not None
        assert bees == [spawned]

    def test_roll_above_chance_does_nothing(self, rules):
        """A roll at or over spawn_chance adds nothing."""
        spawner = BeeSpawner(rules, SIZES, ScriptedRandom([0.05]))
        bees = []
        assert spawner.update(bees) is None
        assert bees == []

    def test_cap_blocks_spawn(self, rules):
        """No spawn when the list is already at the cap."""
        spawner = BeeSpawner(rules, SIZES, ScriptedRandom([0.0]))
        bees = [make_bee() for _ in range(rules.max_bees)]
        assert spawner.update(bees) is None
        assert len(bees) == rules.max_bees

    def test_count_never_exceeds_cap(self, rules):
        """Many ticks with guaranteed spawns stop at the cap."""
        always = rules.model_copy(update={'spawn_chance': 1.0})
        spawner = BeeSpawner(always, SIZES, random.Random(3))
        bees = []
        for _ in range(100):
            spawner.update(bees)
            assert len(bees) <= always.max_bees
        assert len(bees) == always.max_bees


class TestCreateBee:
    """Test the attributes of spawned entities."""

    def test_hornet_and_high_speed(self, rules):
        """Low kind and tier rolls give a high speed hornet."""
        rng = ScriptedRandom([0.1, 0.05, 1.0, 0.0], [100, 200])
        bee = BeeSpawner(rules, SIZES, rng).create_bee()

        assert bee.kind == EntityKind.HORNET
        assert bee.speed_tier == SpeedTier.HIGH
        assert (bee.width, bee.height) == (25, 20)
        assert (bee.x, bee.y) == (100.0, 200.0)
        assert bee.speed_x == pytest.approx(5.0)
        assert bee.speed_y == pytest.approx(-5.0)
        assert bee.visible

    def test_normal_bee(self, rules):
        """High kind and tier rolls give a normal bee with speed base 2."""
        rng = ScriptedRandom([0.2, 0.1, 0.75, 0.25], [0, 0])
        bee = BeeSpawner(rules, SIZES, rng).create_bee()

        assert bee.kind == EntityKind.BEE
        assert bee.speed_tier == SpeedTier.NORMAL
        assert (bee.width, bee.height) == (20, 15)
        assert bee.speed_x == pytest.approx(1.0)
        assert bee.speed_y == pytest.approx(-1.0)

    def test_position_range_excludes_entity_size(self, rules):
        """x and y are drawn from [0, screen - size)."""
        rng = ScriptedRandom([0.9, 0.9, 0.5, 0.5], [7, 8])
        rng_calls = []
        original = rng.randrange

        def recording_randrange(*args):
            rng_calls.append(args)
            return original(*args)

        rng.randrange = recording_randrange
        BeeSpawner(rules, SIZES, rng).create_bee()

        assert rng_calls == [(config.SCREEN_WIDTH - 20,), (config.SCREEN_HEIGHT - 15,)]

    def test_spawned_entities_fully_on_screen(self, rules):
        """Seeded spawns always start inside the screen."""
        spawner = BeeSpawner(rules, SIZES, random.Random(42))
        for _ in range(200):
            bee = spawner.create_bee()
            assert 0 <= bee.x < rules.screen_width - bee.width
            assert 0 <= bee.y < rules.screen_height - bee.height
            limit = rules.speed_for(bee.speed_tier)
            assert -limit <= bee.speed_x <= limit
            assert -limit <= bee.speed_y <= limit

    def test_seeded_spawns_repeat(self, rules):
        """Same seed, same entities."""
        first = BeeSpawner(rules, SIZES, random.Random(9)).create_bee()
        second = BeeSpawner(rules, SIZES, random.Random(9)).create_bee()
        assert first == second

    def test_kind_mix_roughly_matches_chance(self, rules):
        """About a fifth of spawns are hornets."""
        spawner = BeeSpawner(rules, SIZES, random.Random(1234))
        hornets = sum(spawner.create_bee().is_hornet for _ in range(2000))
        assert 300 < hornets < 500
