from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazycmp import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "lazycmp" / "config.json"
        self._patch = mock.patch("lazycmp.config.CONFIG_PATH", self.config_path)
        self._patch.start()

    def tearDown(self) -> None:
        self._patch.stop()
        self._tmp.cleanup()

    def test_missing_config_loads_as_empty(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_ignore_names())
        self.assertIsNone(config.load_style_name())
        self.assertIsNone(config.load_cache_max_size())

    def test_malformed_or_non_object_config_falls_back(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_ignore_names_and_style_round_trip_under_distinct_keys(self) -> None:
        config.save_ignore_names([".git", "build"])
        config.save_style_name("  friendly  ")

        saved = config.load_config()
        self.assertEqual(saved.get("ignore"), [".git", "build"])
        self.assertEqual(saved.get("style"), "friendly")
        self.assertEqual(config.load_ignore_names(), [".git", "build"])
        self.assertEqual(config.load_style_name(), "friendly")

    def test_blank_style_is_not_saved(self) -> None:
        config.save_style_name("   ")

        self.assertFalse(self.config_path.exists())

    def test_invalid_values_are_treated_as_unset(self) -> None:
        config.save_config({"ignore": ["ok", 3], "style": 7, "cache_max_size": True})
        self.assertIsNone(config.load_ignore_names())
        self.assertIsNone(config.load_style_name())
        self.assertIsNone(config.load_cache_max_size())

        config.save_config({"cache_max_size": 0})
        self.assertIsNone(config.load_cache_max_size())

        config.save_config({"cache_max_size": 250})
        self.assertEqual(config.load_cache_max_size(), 250)


if __name__ == "__main__":
    unittest.main()
