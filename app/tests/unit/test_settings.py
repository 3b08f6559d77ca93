"""
Unit tests for settings.py: SettingsRegistry.
"""

import json
import logging

import pytest
from controllers.settings import DEFAULTS, SettingsRegistry


class TestSettingsRegistry:
    def test_defaults_loaded(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        assert reg.get("terminal_click_radius") == 10.0
        assert reg.get("preview_dash") == [10, 5]

    def test_get_unknown_setting(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        assert reg.get("nonexistent") is None
        assert reg.get("nonexistent", 3) == 3

    def test_set_updates_value(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        reg.set("wire_width", 5.0)
        assert reg.get("wire_width") == 5.0

    def test_set_unknown_rejected(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        with pytest.raises(KeyError):
            reg.set("wire_colour", "red")

    def test_get_all_returns_copy(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        values = reg.get_all()
        values["wire_width"] = 99
        assert reg.get("wire_width") == DEFAULTS["wire_width"]

    def test_reset_defaults(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        reg.set("wire_width", 5.0)
        reg.reset_defaults()
        assert reg.get("wire_width") == DEFAULTS["wire_width"]

    def test_save_and_load(self, tmp_path):
        config_path = tmp_path / "s.json"
        reg = SettingsRegistry(config_path=config_path)
        reg.set("terminal_click_radius", 4.0)
        reg.save()

        reg2 = SettingsRegistry(config_path=config_path)
        assert reg2.get("terminal_click_radius") == 4.0
        assert reg2.get("wire_width") == DEFAULTS["wire_width"]

    def test_save_only_overrides(self, tmp_path):
        config_path = tmp_path / "s.json"
        reg = SettingsRegistry(config_path=config_path)
        reg.set("canvas_width", 640)
        reg.save()

        with open(config_path) as f:
            saved = json.load(f)
        assert saved == {"canvas_width": 640}

    def test_save_creates_directory(self, tmp_path):
        config_path = tmp_path / "nested" / "dir" / "s.json"
        reg = SettingsRegistry(config_path=config_path)
        reg.save()
        assert config_path.exists()

    def test_corrupt_file_ignored(self, tmp_path):
        config_path = tmp_path / "s.json"
        config_path.write_text("{not json")
        reg = SettingsRegistry(config_path=config_path)
        assert reg.get_all() == DEFAULTS

    def test_non_object_file_ignored(self, tmp_path):
        config_path = tmp_path / "s.json"
        config_path.write_text("[1, 2, 3]")
        reg = SettingsRegistry(config_path=config_path)
        assert reg.get_all() == DEFAULTS

    def test_unknown_keys_ignored(self, tmp_path):
        config_path = tmp_path / "s.json"
        config_path.write_text(json.dumps({"bogus": 1, "wire_width": 2.0}))
        reg = SettingsRegistry(config_path=config_path)
        assert reg.get("bogus") is None
        assert reg.get("wire_width") == 2.0

    def test_bad_typed_value_ignored(self, tmp_path, caplog):
        config_path = tmp_path / "s.json"
        config_path.write_text(json.dumps({
            "terminal_click_radius": "big",
            "wire_width": True,
            "preview_dash": [10, "x"],
            "canvas_width": 800.5,
            "canvas_height": 600,
        }))
        with caplog.at_level(logging.WARNING):
            reg = SettingsRegistry(config_path=config_path)
        assert reg.get("terminal_click_radius") == DEFAULTS["terminal_click_radius"]
        assert reg.get("wire_width") == DEFAULTS["wire_width"]
        assert reg.get("preview_dash") == DEFAULTS["preview_dash"]
        assert reg.get("canvas_width") == DEFAULTS["canvas_width"]
        assert reg.get("canvas_height") == 600
        assert "terminal_click_radius" in caplog.text

    def test_int_accepted_for_float_setting(self, tmp_path):
        config_path = tmp_path / "s.json"
        config_path.write_text(json.dumps({"terminal_click_radius": 4}))
        reg = SettingsRegistry(config_path=config_path)
        assert reg.get("terminal_click_radius") == 4

    def test_set_bad_type_rejected(self, tmp_path):
        reg = SettingsRegistry(config_path=tmp_path / "s.json")
        with pytest.raises(TypeError):
            reg.set("wire_click_width", "wide")
        assert reg.get("wire_click_width") == DEFAULTS["wire_click_width"]
