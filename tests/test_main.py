"""Tests for application start-up helpers."""

import json
import logging

import pytest

from config_manager import ConfigManager
from main import configured_log_level


class TestLogLevel:

    @pytest.mark.parametrize("value, level", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("chatty", logging.INFO),
        ("basic_format", logging.INFO),
    ])
    def test_level_from_config(self, tmp_path, value, level):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": value}), encoding="utf-8")
        assert configured_log_level(ConfigManager(str(path))) == level

    def test_missing_config_is_info(self, tmp_path):
        assert configured_log_level(ConfigManager(str(tmp_path / "none.json"))) == logging.INFO
