"""Tests for the JSON settings store."""

import json

from config_manager import ConfigManager


class TestConfigManager:

    def test_defaults_when_missing(self, tmp_path):
        config = ConfigManager(str(tmp_path / "config.json"))
        assert config.get("window_width") == 800
        assert config.get("max_recent_files") == 10

    def test_merges_over_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"window_width": 1024, "custom": True}), encoding="utf-8")
        config = ConfigManager(str(path))
        assert config.get("window_width") == 1024
        assert config.get("custom") is True
        assert config.get("swatch_size") == 128

    def test_corrupt_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert ConfigManager(str(path)).config == ConfigManager.DEFAULT_CONFIG

    def test_save_and_reload(self, tmp_path):
        path = str(tmp_path / "config.json")
        config = ConfigManager(path)
        config.set("last_directory", "/tmp/palettes")
        assert config.save_config() is True
        assert ConfigManager(path).get("last_directory") == "/tmp/palettes"

    def test_wrong_typed_value_keeps_default(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"swatch_size": "huge", "undecorated": False}), encoding="utf-8")
        config = ConfigManager(str(path))
        assert config.get("swatch_size") == 128
        assert config.get("undecorated") is False
        assert "swatch_size" in caplog.text

    def test_non_object_root_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert ConfigManager(str(path)).config == ConfigManager.DEFAULT_CONFIG
