"""Tests for Bee Catch configuration."""
from games.BeeCatch import config


class TestDefaultRules:
    """DEFAULT_RULES mirrors the module constants."""

    def test_rules_built_from_constants(self):
        rules = config.DEFAULT_RULES
        assert rules.screen_width == config.SCREEN_WIDTH
        assert rules.screen_height == config.SCREEN_HEIGHT
        assert rules.game_time == config.GAME_TIME
        assert rules.max_bees == config.MAX_BEES
        assert rules.max_hornets == config.MAX_HORNETS
        assert rules.lightning_ticks == config.LIGHTNING_TICKS

    def test_classic_values(self):
        rules = config.DEFAULT_RULES
        assert (rules.screen_width, rules.screen_height) == (800, 600)
        assert rules.spawn_chance == 0.05
        assert rules.hornet_chance == 0.2
        assert rules.high_speed_chance == 0.1
        assert rules.bee_points == 1
        assert rules.high_speed_bee_points == 3


class TestEnvHelpers:
    """Test the environment readers."""

    def test_int_default(self, monkeypatch):
        monkeypatch.delenv('BEE_TEST_VALUE', raising=False)
        assert config._get_int('BEE_TEST_VALUE', 7) == 7

    def test_int_from_env(self, monkeypatch):
        monkeypatch.setenv('BEE_TEST_VALUE', '12')
        assert config._get_int('BEE_TEST_VALUE', 7) == 12

    def test_float_from_env(self, monkeypatch):
        monkeypatch.setenv('BEE_TEST_VALUE', '0.5')
        assert config._get_float('BEE_TEST_VALUE', 0.1) == 0.5
