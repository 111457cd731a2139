"""Configuration management for the N-Queens local-search experiment suite.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize experiment settings and search limits.

File format (high-level)
------------------------
- experiment_settings: N values, runs per strategy, base seed, output directory.
- limit_settings: restart ceiling applied to every solve.
- strategies: list of strategy labels to compare
  (e.g., ["hill-climbing", "min-conflicts"]).

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the experiment configuration.

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

        with open(self.config_path, "r") as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return experiment settings (sizes, runs, seed, output dir)."""
        return self.config.get("experiment_settings", {})

    def get_limit_settings(self):
        """Return search limits (restart ceiling)."""
        return self.config.get("limit_settings", {})

    def get_strategies(self):
        """Return the strategy labels to compare."""
        return self.config.get("strategies", ["hill-climbing", "min-conflicts"])

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
