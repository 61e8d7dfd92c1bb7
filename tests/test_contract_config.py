from __future__ import annotations

import unittest

from sessiongrid.config import ConfigError, GridConfig, config_from_env


class TestGridConfigContract(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = GridConfig()
        self.assertEqual(cfg.week_start_weekday, 5)  # Saturday
        self.assertEqual(cfg.default_duration_min, 90)
        self.assertEqual(cfg.grid_start_hour, 8)
        self.assertAlmostEqual(cfg.px_per_min, 64.0 / 60.0)
        self.assertEqual(cfg.min_height_px, 55.0)

    def test_explicit_out_of_range_raises(self) -> None:
        with self.assertRaises(ConfigError):
            GridConfig(week_start_weekday=7)
        with self.assertRaises(ConfigError):
            GridConfig(default_duration_min=0)
        with self.assertRaises(ValueError):
            GridConfig(px_per_hour=0)

    def test_from_mapping_falls_back_per_key(self) -> None:
        cfg = GridConfig.from_mapping({
            "week_start_weekday": 0,
            "default_duration_min": "sixty",
            "grid_start_hour": 30,
            "px_per_hour": 120,
        })
        self.assertEqual(cfg.week_start_weekday, 0)
        self.assertEqual(cfg.default_duration_min, 90)
        self.assertEqual(cfg.grid_start_hour, 8)
        self.assertEqual(cfg.px_per_hour, 120.0)
        self.assertEqual(GridConfig.from_mapping(None), GridConfig())

    def test_env_overlay(self) -> None:
        env = {
            "SESSIONGRID_DEFAULT_DURATION": "120",
            "SESSIONGRID_PX_PER_HOUR": "48.5",
            "SESSIONGRID_WEEK_START": "junk",
        }
        cfg = config_from_env(GridConfig(week_start_weekday=6), environ=env)
        self.assertEqual(cfg.default_duration_min, 120)
        self.assertEqual(cfg.px_per_hour, 48.5)
        self.assertEqual(cfg.week_start_weekday, 6)
        self.assertEqual(config_from_env(environ={}), GridConfig())


if __name__ == "__main__":
    unittest.main(verbosity=2)
