"""
Configuration Manager Module
Application settings stored as JSON next to the app
"""

import os
import json
import logging


class ConfigManager:
    """Settings merged over DEFAULT_CONFIG"""

    DEFAULT_CONFIG = {
        # Window
        'window_width': 800,
        'window_height': 600,
        'window_title': 'Color Palette Viewer',
        'title_bar_height': 64,
        'undecorated': True,

        # Palette display
        'swatch_size': 128,
        'grid_gap': 8,

        # Files
        'max_recent_files': 10,
        'data_dir': 'data',
        'last_directory': '',

        'log_level': 'INFO'
    }

    def __init__(self, config_path='config.json'):
        self.config_path = config_path
        self.config = self.load_config()

    def _merge(self, loaded):
        """Overlay loaded values; a known key whose value has the wrong type keeps its default"""
        config = dict(self.DEFAULT_CONFIG)
        for key, value in loaded.items():
            default = self.DEFAULT_CONFIG.get(key)
            if default is not None and type(value) is not type(default):
                logging.warning(f"Config '{key}' has invalid value {value!r}; using {default!r}")
                continue
            config[key] = value
        return config

    def load_config(self):
        if not os.path.exists(self.config_path):
            logging.info(f"No config at {self.config_path}; using defaults")
            return dict(self.DEFAULT_CONFIG)

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logging.error(f"Config load error: {e}. Using defaults.")
            return dict(self.DEFAULT_CONFIG)

        if not isinstance(loaded, dict):
            logging.error(f"Config {self.config_path} is not a JSON object. Using defaults.")
            return dict(self.DEFAULT_CONFIG)

        logging.info(f"Config loaded from {self.config_path}")
        return self._merge(loaded)

    def save_config(self):
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logging.error(f"Config save error: {e}")
            return False
        return True

    def get(self, key, default=None):
        return self.config.get(key, default)

    def set(self, key, value):
        self.config[key] = value
