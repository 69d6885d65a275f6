"""Configuration management for the queens-and-regions generator.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize puzzle defaults, the region palette, and batch experiment
settings.

File format (high-level)
------------------------
- puzzle_settings: default board size, region-growing seed, queen marker.
- palette: ordered list of region colors (cycled past its length).
- experiment_settings: board sizes, runs per size, solver time limit and
  output directory for batch mode.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file."""
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_puzzle_settings(self):
        """Return puzzle defaults (size, seed, queen marker)."""
        return self.config.get("puzzle_settings", {})

    def get_palette(self):
        """Return the configured region palette, or an empty list if unset."""
        return list(self.config.get("palette", []))

    def get_experiment_settings(self):
        """Return batch experiment settings (sizes, runs, time limit, output dir)."""
        return self.config.get("experiment_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
