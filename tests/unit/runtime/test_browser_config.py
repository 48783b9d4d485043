"""Tests for config persistence and input sanitization.

Malformed or missing config data must always fall back to defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm.runtime import config


class BrowserConfigTests(unittest.TestCase):
    def test_missing_file_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = config.load_settings(Path(tmp) / "missing.json")
        self.assertEqual(settings, config.BrowserSettings())

    def test_show_hidden_round_trip_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("lazyfm.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name("ocean")
                config.save_show_hidden(True)

                self.assertTrue(config.load_show_hidden())
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_config(), {"theme": "ocean", "show_hidden": True})

    def test_blank_theme_name_is_not_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config.save_theme_name("   ", config_path)
            self.assertFalse(config_path.exists())

    def test_malformed_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with self.assertLogs("lazyfm.runtime.config", level="WARNING"):
                self.assertEqual(config.load_config(config_path), {})

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2, 3]", encoding="utf-8")
            self.assertEqual(config.load_config(config_path), {})

    def test_settings_accept_only_well_typed_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps(
                    {
                        "show_hidden": "yes",
                        "theme": "  plain ",
                        "syntax_style": 42,
                        "pretty_markdown": False,
                        "enable_logging": True,
                        "start_dir": "~/projects",
                        "show_icons": 1,
                    }
                ),
                encoding="utf-8",
            )
            settings = config.load_settings(config_path)

        self.assertFalse(settings.show_hidden)
        self.assertEqual(settings.theme, "plain")
        self.assertIsNone(settings.syntax_style)
        self.assertFalse(settings.pretty_markdown)
        self.assertTrue(settings.enable_logging)
        self.assertEqual(settings.start_dir, Path("~/projects").expanduser())
        self.assertFalse(settings.show_icons)

    def test_unwritable_config_is_logged_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with self.assertLogs("lazyfm.runtime.config", level="WARNING"):
                config.save_config({"show_hidden": True}, blocker / "config.json")


if __name__ == "__main__":
    unittest.main()
