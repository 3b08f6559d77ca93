"""
settings.py - Central registry for user-tunable canvas settings.

Stores default values and user overrides in a JSON config file.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Default settings: name -> value
DEFAULTS = {
    # Hit testing (pixels)
    "terminal_click_radius": 10.0,
    "wire_click_width": 15.0,
    # Drawing
    "terminal_radius": 5.0,
    "wire_width": 3.0,
    "preview_dash": [10, 5],
    # Window
    "canvas_width": 1200,
    "canvas_height": 800,
}

_CONFIG_DIR = Path.home() / ".wire-canvas"
_CONFIG_FILE = _CONFIG_DIR / "settings.json"


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_value(name, value):
    """Check that a value has the same shape as the setting's default."""
    default = DEFAULTS[name]
    if isinstance(default, list):
        return isinstance(value, list) and all(_is_number(v) for v in value)
    if isinstance(default, float):
        return _is_number(value)
    return isinstance(value, int) and not isinstance(value, bool)


class SettingsRegistry:
    """Central registry for canvas settings with load/save support."""

    def __init__(self, config_path=None):
        self._values = dict(DEFAULTS)
        self._config_path = Path(config_path) if config_path else _CONFIG_FILE
        self.load()

    def get(self, name, default=None):
        """Return the value of the given setting."""
        return self._values.get(name, default)

    def set(self, name, value):
        """
        Set a known setting.

        Raises:
            KeyError: If the setting name is unknown.
            TypeError: If the value does not match the default's type.
        """
        if name not in DEFAULTS:
            raise KeyError(f"Unknown setting: {name}")
        if not is_valid_value(name, value):
            raise TypeError(f"Invalid value for {name}: {value!r}")
        self._values[name] = value

    def get_all(self):
        """Return a copy of all current settings."""
        return dict(self._values)

    def reset_defaults(self):
        """Reset all settings to defaults."""
        self._values = dict(DEFAULTS)

    def save(self):
        """Save user overrides to JSON config file."""
        # Only save non-default values
        overrides = {k: v for k, v in self._values.items() if v != DEFAULTS.get(k)}
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_path, "w") as f:
                json.dump(overrides, f, indent=2)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def load(self):
        """Load user overrides from JSON config file."""
        if not self._config_path.exists():
            return
        try:
            with open(self._config_path) as f:
                overrides = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load settings config: %s", e)
            return
        if not isinstance(overrides, dict):
            logger.warning("Ignoring settings config %s: not a JSON object", self._config_path)
            return
        for key, value in overrides.items():
            if key not in DEFAULTS:
                logger.debug("Ignoring unknown setting %s", key)
            elif not is_valid_value(key, value):
                logger.warning("Ignoring invalid value for setting %s: %r", key, value)
            else:
                self._values[key] = value
