"""
Configuration management
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed"""


class Config:
    """Application configuration manager"""

    DEFAULT_CONFIG = {
        "simulation": {
            "sigma": 10.0,
            "rho": 28.0,
            "beta": 8.0 / 3.0,
            "dt": 0.01,
            "initial_state": [0.01, 0.0, 0.0],
            "history_size": 5000,
            "scale": 10.0,
        },
        "display": {
            "width": 800,
            "height": 600,
            "interval_ms": 16,  # ~60 Hz
            "point_size": 3,
            "antialias": True,
        },
        "audio": {
            "file": "zimmer.wav",
            "enabled": True,
            "volume": 1.0,
            "blocksize": 1024,
        },
        "logging": {
            "level": "INFO",
        },
    }

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path) if config_path else Path.home() / ".lorenz" / "config.json"
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

    def load(self):
        """Load configuration from file, merging each section over the defaults"""
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path, "r") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config {self.config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config {self.config_path} must contain a JSON object")

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def save(self):
        """Save configuration to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any):
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def get_all(self) -> Dict:
        """Get all configuration"""
        return copy.deepcopy(self.config)
