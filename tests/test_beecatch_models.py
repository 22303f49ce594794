"""
Tests for the Bee Catch models: RulesConfig and ScoreData.
"""

import pytest
from pydantic import ValidationError

from models import EntityKind, RulesConfig, ScoreData, SpeedTier


def make_rules(**overrides) -> RulesConfig:
    """RulesConfig with the classic values, optionally overridden."""
    values = dict(
        screen_width=800,
        screen_height=600,
        game_time=60,
        spawn_chance=0.05,
        max_bees=10,
        hornet_chance=0.2,
        high_speed_chance=0.1,
        normal_speed=2.0,
        high_speed=5.0,
        max_hornets=3,
        bee_points=1,
        high_speed_bee_points=3,
        lightning_ticks=30,
        lightning_bolts=10,
    )
    values.update(overrides)
    return RulesConfig(**values)


class TestRulesConfigValidation:
    """Test RulesConfig validation."""

    def test_classic_values_valid(self):
        """The classic game constants validate."""
        rules = make_rules()
        assert rules.max_bees == 10

    @pytest.mark.parametrize('field', ['spawn_chance', 'hornet_chance', 'high_speed_chance'])
    def test_probability_above_one_rejected(self, field):
        """Chances must be within [0, 1]."""
        with pytest.raises(ValidationError):
            make_rules(**{field: 1.5})

    def test_zero_cap_rejected(self):
        """At least one entity must be allowed on screen."""
        with pytest.raises(ValidationError):
            make_rules(max_bees=0)

    def test_high_speed_slower_than_normal_rejected(self):
        """High speed tier cannot be slower than normal."""
        with pytest.raises(ValidationError, match='high_speed'):
            make_rules(normal_speed=5.0, high_speed=2.0)

    def test_frozen(self):
        """Rules cannot be modified after creation."""
        rules = make_rules()
        with pytest.raises(ValidationError):
            rules.max_bees = 20


class TestRulesConfigLookups:
    """Test per-tier lookups."""

    def test_speed_for(self):
        """Speed base per tier."""
        rules = make_rules()
        assert rules.speed_for(SpeedTier.NORMAL) == 2.0
        assert rules.speed_for(SpeedTier.HIGH) == 5.0

    def test_points_for(self):
        """Points per tier."""
        rules = make_rules()
        assert rules.points_for(SpeedTier.NORMAL) == 1
        assert rules.points_for(SpeedTier.HIGH) == 3


class TestScoreData:
    """Test ScoreData."""

    def test_defaults_zero(self):
        """A fresh score is all zeros."""
        data = ScoreData()
        assert (data.score, data.bees_caught, data.hornets_hit) == (0, 0, 0)

    def test_negative_rejected(self):
        """Negative counters are invalid."""
        with pytest.raises(ValidationError):
            ScoreData(score=-1)


class TestEnums:
    """Test enum values."""

    def test_string_values(self):
        """Enums are string enums."""
        assert EntityKind.HORNET == "hornet"
        assert SpeedTier.HIGH.value == "high"
