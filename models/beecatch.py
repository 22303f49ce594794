"""
Bee Catch models.

Enums describing entities and input, and the Pydantic v2 model that
validates the gameplay constants of a round.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class EventType(str, Enum):
    """Types of input events.

    Attributes:
        HIT: A press that should be hit-tested against entities
        MISS: A press the source already knows missed; never hit-tested
    """
    HIT = "hit"
    MISS = "miss"


class EntityKind(str, Enum):
    """What a flying entity is.

    Attributes:
        BEE: Scores points when clicked
        HORNET: Costs a life when clicked
    """
    BEE = "bee"
    HORNET = "hornet"


class SpeedTier(str, Enum):
    """Speed class of an entity, picked once at spawn."""
    NORMAL = "normal"
    HIGH = "high"


class RulesConfig(BaseModel):
    """
    Gameplay constants for one round of Bee Catch.

    Built once from the game config; the game mode, spawner and score
    tracker all read their numbers from here.
    """
    model_config = {"frozen": True}

    screen_width: int = Field(description="Logical screen width in pixels", gt=0)
    screen_height: int = Field(description="Logical screen height in pixels", gt=0)
    game_time: int = Field(description="Round length in seconds", gt=0)

    spawn_chance: float = Field(
        description="Chance per tick that a new entity spawns",
        ge=0.0, le=1.0
    )
    max_bees: int = Field(description="Maximum number of entities on screen", ge=1)
    hornet_chance: float = Field(
        description="Chance that a spawned entity is a hornet",
        ge=0.0, le=1.0
    )
    high_speed_chance: float = Field(
        description="Chance that a spawned entity is high speed",
        ge=0.0, le=1.0
    )
    normal_speed: float = Field(description="Max speed per axis (pixels/tick), normal tier", gt=0.0)
    high_speed: float = Field(description="Max speed per axis (pixels/tick), high tier", gt=0.0)

    max_hornets: int = Field(description="Hornet hits that end the round", ge=1)
    bee_points: int = Field(description="Points for a normal bee", ge=0)
    high_speed_bee_points: int = Field(description="Points for a high speed bee", ge=0)

    lightning_ticks: int = Field(description="Ticks the lightning effect stays on", ge=1)
    lightning_bolts: int = Field(description="Lightning lines drawn per frame", ge=0)

    @model_validator(mode='after')
    def validate_speed_tiers(self) -> 'RulesConfig':
        """High speed entities must not be slower than normal ones."""
        if self.high_speed < self.normal_speed:
            raise ValueError(
                f'high_speed ({self.high_speed}) must be >= normal_speed ({self.normal_speed})'
            )
        return self

    def speed_for(self, tier: SpeedTier) -> float:
        """Max per-axis speed for a speed tier."""
        return self.high_speed if tier == SpeedTier.HIGH else self.normal_speed

    def points_for(self, tier: SpeedTier) -> int:
        """Points awarded for catching a bee of the given tier."""
        return self.high_speed_bee_points if tier == SpeedTier.HIGH else self.bee_points


class ScoreData(BaseModel):
    """
    Score state of a round.

    Attributes:
        score: Points from caught bees
        bees_caught: Number of bees clicked
        hornets_hit: Number of hornets clicked (penalties)
    """
    model_config = {"frozen": True}

    score: int = Field(default=0, ge=0, description="Points from caught bees")
    bees_caught: int = Field(default=0, ge=0, description="Bees clicked")
    hornets_hit: int = Field(default=0, ge=0, description="Hornets clicked")
