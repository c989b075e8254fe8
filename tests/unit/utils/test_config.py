"""
Test cases for resolve configuration.

Tests focus on ensuring configuration presets work correctly for different use cases.
"""

import unittest

from jsonmend.utils.config import (
    ExtractionMode,
    ExtractionSettings,
    RegexSettings,
    RepairSettings,
    ResolveConfig,
)


class TestConfigurationPresets(unittest.TestCase):
    """Test configuration presets and their behavior."""

    def test_default_preset(self) -> None:
        config = ResolveConfig.default()
        self.assertEqual(config.extraction_mode, ExtractionMode.GREEDY)
        self.assertTrue(config.repair_enabled)
        self.assertEqual(config.repair, RepairSettings())
        self.assertEqual(config.regex, RegexSettings())
        self.assertTrue(config.log_failures)

    def test_balanced_preset(self) -> None:
        config = ResolveConfig.balanced()
        self.assertEqual(config.extraction_mode, ExtractionMode.BALANCED)
        self.assertTrue(config.repair_enabled)

    def test_strict_preset_disables_every_repair_step(self) -> None:
        config = ResolveConfig.strict()
        self.assertFalse(config.repair_enabled)
        self.assertEqual(config.extraction_mode, ExtractionMode.GREEDY)

    def test_from_features(self) -> None:
        config = ResolveConfig.from_features(
            {"remove_trailing_commas", "balanced_extraction"}
        )
        assert config.repair is not None
        self.assertTrue(config.repair.remove_trailing_commas)
        self.assertFalse(config.repair.remove_newlines_before_closers)
        self.assertFalse(config.repair.balance_braces)
        self.assertFalse(config.repair.balance_brackets)
        self.assertEqual(config.extraction_mode, ExtractionMode.BALANCED)

    def test_from_features_rejects_unknown(self) -> None:
        with self.assertRaises(ValueError):
            ResolveConfig.from_features({"fix_unquoted_keys"})

    def test_settings_groups_filled_in(self) -> None:
        config = ResolveConfig(extraction=ExtractionSettings(mode=ExtractionMode.BALANCED))
        self.assertIsInstance(config.repair, RepairSettings)
        self.assertIsInstance(config.regex, RegexSettings)


class TestConfigurationValidation(unittest.TestCase):
    """Test that invalid values are rejected at construction."""

    def test_non_positive_timeout(self) -> None:
        for timeout in (0, -1.0):
            with self.subTest(timeout=timeout):
                with self.assertRaises(ValueError):
                    ResolveConfig(regex=RegexSettings(timeout=timeout))

    def test_unbounded_timeout_allowed(self) -> None:
        config = ResolveConfig(regex=RegexSettings(timeout=None))
        assert config.regex is not None
        self.assertIsNone(config.regex.timeout)

    def test_negative_preview_length(self) -> None:
        with self.assertRaises(ValueError):
            ResolveConfig(preview_length=-1)


if __name__ == "__main__":
    unittest.main()
