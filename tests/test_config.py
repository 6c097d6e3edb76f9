"""Tests for configuration loading."""

import json

from slashline.config import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_MAX_SUGGESTIONS,
    Config,
)


class TestConfig:
    """Test Config load and save."""

    def test_defaults(self):
        """Default values should be set."""
        config = Config()
        assert config.match_mode == "prefix"
        assert config.max_suggestions == DEFAULT_MAX_SUGGESTIONS
        assert config.history_size == DEFAULT_HISTORY_SIZE
        assert config.log_level == "WARNING"

    def test_missing_file(self, tmp_path):
        """Missing file gives defaults."""
        assert Config.load(tmp_path / "nope.json") == Config()

    def test_save_and_load(self, tmp_path):
        """Saved values come back."""
        path = tmp_path / "sub" / "config.json"
        Config(match_mode="fuzzy", max_suggestions=5, history_size=10, log_level="DEBUG").save(path)
        loaded = Config.load(path)
        assert loaded.match_mode == "fuzzy"
        assert loaded.max_suggestions == 5
        assert loaded.history_size == 10
        assert loaded.log_level == "DEBUG"

    def test_broken_json(self, tmp_path):
        """Unreadable JSON gives defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert Config.load(path) == Config()

    def test_not_a_dict(self, tmp_path):
        """A JSON list gives defaults."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert Config.load(path) == Config()

    def test_bad_values_fall_back(self, tmp_path):
        """Invalid values are replaced by defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "match_mode": "regex",
            "max_suggestions": 0,
            "history_size": "lots",
            "log_level": "chatty",
        }))
        assert Config.load(path) == Config()

    def test_log_level_case(self):
        """Log level is uppercased."""
        assert Config.from_dict({"log_level": "info"}).log_level == "INFO"
