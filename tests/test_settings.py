# tests/test_settings.py

"""Tests for the Settings configuration class."""

import os
import unittest
from pathlib import Path
from unittest.mock import patch

from multipane_shop.config.settings import Settings, parse_orientation
from multipane_shop.services.presentation import Orientation


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_cell_aspect_ratio_positive(self) -> None:
        self.assertIsInstance(Settings.CELL_ASPECT_RATIO, float)
        self.assertGreater(Settings.CELL_ASPECT_RATIO, 0)

    def test_orientation_choices(self) -> None:
        self.assertEqual(
            Settings.ORIENTATION_CHOICES, ["auto", "landscape", "portrait"]
        )

    def test_path_constants_are_paths(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)
        self.assertEqual(Settings.LOGS_DIR.parent, Settings.BASE_DIR)

    def test_app_title_non_empty(self) -> None:
        self.assertTrue(Settings.APP_TITLE)


class TestOrientationOverride(unittest.TestCase):
    """Environment-driven orientation override."""

    def test_unset_means_auto(self) -> None:
        self.assertIsNone(Settings.orientation_override())

    def test_landscape_from_env(self) -> None:
        with patch.dict(
            os.environ, {Settings.ORIENTATION_ENV_VAR: "landscape"}
        ):
            self.assertIs(
                Settings.orientation_override(), Orientation.LANDSCAPE
            )

    def test_portrait_from_env_any_case(self) -> None:
        with patch.dict(
            os.environ, {Settings.ORIENTATION_ENV_VAR: " Portrait "}
        ):
            self.assertIs(
                Settings.orientation_override(), Orientation.PORTRAIT
            )

    def test_invalid_value_logged_and_ignored(self) -> None:
        with patch.dict(
            os.environ, {Settings.ORIENTATION_ENV_VAR: "sideways"}
        ):
            with self.assertLogs("multipane_shop.settings", "WARNING"):
                self.assertIsNone(Settings.orientation_override())

    def test_parse_auto(self) -> None:
        self.assertIsNone(parse_orientation("auto"))
        self.assertIsNone(parse_orientation(""))


if __name__ == "__main__":
    unittest.main()
