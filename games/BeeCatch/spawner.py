"""
Bee Catch - Entity spawner.

Rolls once per tick for a new bee or hornet, up to the on-screen cap.
"""
import random
from typing import Dict, List, Optional, Tuple

from hive.logging import get_logger
from models import EntityKind, RulesConfig, SpeedTier
from games.BeeCatch.bee import Bee

log = get_logger('spawner')


class BeeSpawner:
    """Creates bees and hornets at random positions with random velocities.

    Random numbers are drawn in a fixed order (spawn roll, kind, speed tier,
    x, y, speed x, speed y) so a seeded generator replays the same round.
    """

    def __init__(
        self,
        rules: RulesConfig,
        hitbox_sizes: Dict[EntityKind, Tuple[int, int]],
        rng: Optional[random.Random] = None,
    ):
        """Initialize the spawner.

        Args:
            rules: Gameplay constants (chances, cap, speeds, screen size)
            hitbox_sizes: (width, height) of the hit box for each entity kind
            rng: Random generator, a fresh unseeded one if None
        """
        self._rules = rules
        self._hitbox_sizes = dict(hitbox_sizes)
        self._rng = rng if rng is not None else random.Random()

    def update(self, bees: List[Bee]) -> Optional[Bee]:
        """Roll for a spawn and append the new entity to `bees`.

        Args:
            bees: Active entity list, appended to in place

        Returns:
            The spawned entity, or None if nothing spawned this tick
        """
        if self._rng.random() < self._rules.spawn_chance and len(bees) < self._rules.max_bees:
            bee = self.create_bee()
            bees.append(bee)
            log.debug("Spawned %s (%d on screen)", bee, len(bees))
            return bee
        return None

    def create_bee(self) -> Bee:
        """Create one entity with random kind, speed tier, position and velocity."""
        rng = self._rng
        rules = self._rules

        kind = EntityKind.HORNET if rng.random() < rules.hornet_chance else EntityKind.BEE
        tier = SpeedTier.HIGH if rng.random() < rules.high_speed_chance else SpeedTier.NORMAL
        width, height = self._hitbox_sizes[kind]
        speed_base = rules.speed_for(tier)

        return Bee(
            x=float(rng.randrange(max(1, rules.screen_width - width))),
            y=float(rng.randrange(max(1, rules.screen_height - height))),
            speed_x=(rng.random() * 2 - 1) * speed_base,
            speed_y=(rng.random() * 2 - 1) * speed_base,
            width=width,
            height=height,
            kind=kind,
            speed_tier=tier,
            visible=True,
        )
