# sessiongrid/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .util.weeks import SATURDAY

DEFAULT_DURATION_MIN = 90
DEFAULT_GRID_START_HOUR = 8
DEFAULT_PX_PER_HOUR = 64.0
DEFAULT_MIN_HEIGHT_PX = 55.0


class ConfigError(ValueError):
    """Raised when an explicitly constructed GridConfig is out of range."""


@dataclass(frozen=True)
class GridConfig:
    week_start_weekday: int = SATURDAY    # Python weekday of grid column 0
    default_duration_min: int = DEFAULT_DURATION_MIN
    grid_start_hour: int = DEFAULT_GRID_START_HOUR
    px_per_hour: float = DEFAULT_PX_PER_HOUR
    min_height_px: float = DEFAULT_MIN_HEIGHT_PX

    def __post_init__(self) -> None:
        if not (0 <= int(self.week_start_weekday) <= 6):
            raise ConfigError(f"week_start_weekday must be in 0..6, got {self.week_start_weekday!r}")
        if int(self.default_duration_min) <= 0:
            raise ConfigError(f"default_duration_min must be positive, got {self.default_duration_min!r}")
        if not (0 <= int(self.grid_start_hour) <= 23):
            raise ConfigError(f"grid_start_hour must be in 0..23, got {self.grid_start_hour!r}")
        if float(self.px_per_hour) <= 0:
            raise ConfigError(f"px_per_hour must be positive, got {self.px_per_hour!r}")
        if float(self.min_height_px) < 0:
            raise ConfigError(f"min_height_px must be >= 0, got {self.min_height_px!r}")

    @property
    def px_per_min(self) -> float:
        return float(self.px_per_hour) / 60.0

    @classmethod
    def from_mapping(cls, cfg: Optional[Mapping[str, Any]]) -> "GridConfig":
        """Build a config from a loose cfg dict; unusable values fall back to defaults."""
        if not isinstance(cfg, Mapping):
            return cls()

        def _int(key: str, default: int, lo: int, hi: Optional[int] = None) -> int:
            v = cfg.get(key)
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                return default
            iv = int(v)
            if iv < lo or (hi is not None and iv > hi):
                return default
            return iv

        def _float(key: str, default: float, lo: float) -> float:
            v = cfg.get(key)
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                return default
            fv = float(v)
            return fv if fv >= lo else default

        return cls(
            week_start_weekday=_int("week_start_weekday", SATURDAY, 0, 6),
            default_duration_min=_int("default_duration_min", DEFAULT_DURATION_MIN, 1),
            grid_start_hour=_int("grid_start_hour", DEFAULT_GRID_START_HOUR, 0, 23),
            px_per_hour=_float("px_per_hour", DEFAULT_PX_PER_HOUR, 1e-9),
            min_height_px=_float("min_height_px", DEFAULT_MIN_HEIGHT_PX, 0.0),
        )


_ENV_KEYS = {
    "SESSIONGRID_WEEK_START": "week_start_weekday",
    "SESSIONGRID_DEFAULT_DURATION": "default_duration_min",
    "SESSIONGRID_GRID_START_HOUR": "grid_start_hour",
    "SESSIONGRID_PX_PER_HOUR": "px_per_hour",
    "SESSIONGRID_MIN_HEIGHT_PX": "min_height_px",
}


def config_from_env(base: Optional[GridConfig] = None, environ: Optional[Mapping[str, str]] = None) -> GridConfig:
    """Overlay SESSIONGRID_* environment variables on `base` (default GridConfig())."""
    env = os.environ if environ is None else environ
    base = base or GridConfig()

    raw: dict[str, Any] = {
        "week_start_weekday": base.week_start_weekday,
        "default_duration_min": base.default_duration_min,
        "grid_start_hour": base.grid_start_hour,
        "px_per_hour": base.px_per_hour,
        "min_height_px": base.min_height_px,
    }
    for env_key, field in _ENV_KEYS.items():
        s = (env.get(env_key, "") or "").strip()
        if not s:
            continue
        try:
            raw[field] = float(s) if field in ("px_per_hour", "min_height_px") else int(s)
        except ValueError:
            continue

    return GridConfig.from_mapping(raw)


__all__ = [
    "ConfigError",
    "DEFAULT_DURATION_MIN",
    "DEFAULT_GRID_START_HOUR",
    "DEFAULT_MIN_HEIGHT_PX",
    "DEFAULT_PX_PER_HOUR",
    "GridConfig",
    "config_from_env",
]
