"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from piquet.config import Config, ElderPolicy, GameConfig, RulesConfig, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()
        assert config.game.seed is None
        assert config.game.player_names == ("Roméo", "Juliette")
        assert config.rules.max_deals == 6
        assert config.rules.elder_policy == ElderPolicy.FIXED
        assert config.logging.level == "INFO"
        assert not config.deal_log.enabled

    def test_missing_file(self, tmp_path):
        """Test that a missing file falls back to defaults."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == Config()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  seed: 000102030405060708090a0b0c0d0e0f\n"
            "  player_names: [Alice, Bob]\n"
            "rules:\n"
            "  elder_policy: alternate\n"
            "  max_deals: 4\n"
            "logging:\n"
            "  level: DEBUG\n"
            "deal_log:\n"
            "  enabled: true\n"
            "  output_path: logs/deals.jsonl\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert bytes.fromhex(config.game.seed) == bytes(range(16))
        assert config.game.player_names == ("Alice", "Bob")
        assert config.rules.elder_policy == ElderPolicy.ALTERNATE
        assert config.rules.max_deals == 4
        assert config.rules.elder_max_exchange == 5
        assert config.logging.level == "DEBUG"
        assert config.deal_log.enabled
        assert config.deal_log.output_path == "logs/deals.jsonl"


class TestValidation:
    """Tests for config field validation."""

    def test_short_seed(self):
        with pytest.raises(ValidationError):
            GameConfig(seed="00ff")

    def test_seed_not_hex(self):
        with pytest.raises(ValidationError):
            GameConfig(seed="z" * 32)

    def test_max_deals_positive(self):
        with pytest.raises(ValidationError):
            RulesConfig(max_deals=0)

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            RulesConfig(elder_policy="sometimes")
