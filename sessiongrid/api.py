"""sessiongrid.api

Stable *library* entrypoint for sessiongrid.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from sessiongrid.binning import bin_day, bin_week, group_by_time
from sessiongrid.config import ConfigError, GridConfig, config_from_env
from sessiongrid.layout import LayoutError, layout, layout_day, layout_overlapping, place
from sessiongrid.model import Box, Occurrence, Placement, Session
from sessiongrid.normalize import normalize_session, normalize_sessions
from sessiongrid.recurrence import occurrences_between, occurs_on
from sessiongrid.related import related_to
from sessiongrid.validate import SessionValidationError, assert_valid_sessions, validate_sessions
from sessiongrid.view import build_week_view, dumps_view
from sessiongrid.window import (
    NavigableWindow,
    can_go_next,
    can_go_previous,
    clamp_week,
    default_day,
    next_day,
    next_week,
    previous_day,
    previous_week,
    resolve,
)


def load_snapshot(
    records: Iterable[Mapping[str, Any]],
    *,
    validate: bool = False,
    day_names: Optional[Mapping[str, int]] = None,
) -> list[Session]:
    """Normalize store records into Sessions.

    validate=True raises SessionValidationError on the first issue instead of
    silently degrading bad records.
    """
    records = list(records or [])
    if validate:
        assert_valid_sessions(records, day_names=day_names)
    return normalize_sessions(records, day_names=day_names)


# --- Public API exports ----------------------------------------------------
_PUBLIC_EXPORTS = (
    "Box",
    "ConfigError",
    "GridConfig",
    "LayoutError",
    "NavigableWindow",
    "Occurrence",
    "Placement",
    "Session",
    "SessionValidationError",
    "assert_valid_sessions",
    "bin_day",
    "bin_week",
    "build_week_view",
    "can_go_next",
    "can_go_previous",
    "clamp_week",
    "config_from_env",
    "default_day",
    "dumps_view",
    "group_by_time",
    "layout",
    "layout_day",
    "layout_overlapping",
    "load_snapshot",
    "next_day",
    "next_week",
    "normalize_session",
    "normalize_sessions",
    "occurrences_between",
    "occurs_on",
    "place",
    "previous_day",
    "previous_week",
    "related_to",
    "resolve",
    "validate_sessions",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
