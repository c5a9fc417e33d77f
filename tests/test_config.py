"""Config persistence tests: round trips and fallback on invalid values."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        self._patch = mock.patch("lazytree.runtime.config.CONFIG_PATH", self.config_path)
        self._patch.start()

    def tearDown(self) -> None:
        self._patch.stop()
        self._tmp.cleanup()

    def test_missing_or_malformed_config_is_empty(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})
        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_theme_and_hidden_round_trip(self) -> None:
        config.save_theme_name(" ocean ")
        config.save_show_hidden(True)

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertTrue(config.load_show_hidden())
        self.assertEqual(config.load_config(), {"theme": "ocean", "show_hidden": True})

    def test_blank_theme_is_not_saved(self) -> None:
        config.save_theme_name("   ")
        self.assertIsNone(config.load_theme_name())

    def test_indent_unit_validation(self) -> None:
        cases = [
            (2, "  "),
            ("   ", "   "),
            ("\t", " "),
            ("ab", " "),
            (" " * 9, " "),
            (True, " "),
            (None, " "),
        ]
        for value, expected in cases:
            config.save_config({"indent_unit": value})
            self.assertEqual(config.load_indent_unit(), expected, value)

    def test_log_spec(self) -> None:
        self.assertIsNone(config.load_log_spec())
        config.save_config({"log": " err "})
        self.assertEqual(config.load_log_spec(), "err")
        config.save_config({"log": 3})
        self.assertIsNone(config.load_log_spec())

    def test_non_boolean_show_hidden_falls_back(self) -> None:
        config.save_config({"show_hidden": "yes"})
        self.assertFalse(config.load_show_hidden())


if __name__ == "__main__":
    unittest.main()
