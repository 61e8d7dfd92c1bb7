# sessiongrid/view.py
from __future__ import annotations

import datetime as dt
import json
from typing import Any, Dict, List, Optional, Sequence

from .binning import bin_week
from .config import GridConfig
from .layout import layout_day, place
from .model import Placement, Session
from .normalize import session_to_record
from .util.timeparse import format_hhmm
from .window import (
    NavigableWindow,
    can_go_next,
    can_go_previous,
    clamp_week,
    default_day,
    resolve,
)

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore


def _item(p: Placement, cfg: GridConfig, column_width: float) -> Dict[str, Any]:
    o = p.occurrence
    box = place(p, cfg, column_width=column_width)
    return {
        "id": o.session.id,
        "kind": o.session.kind,
        "subject": o.session.subject,
        "teacher_name": o.session.teacher_name,
        "grade": o.session.grade,
        "date_iso": o.date.isoformat(),
        "start": format_hhmm(o.start_time),
        "dur_min": o.duration_min(cfg.default_duration_min),
        "lane": p.lane_index,
        "total_lanes": p.lane_count,
        "overlap": p.lane_count > 1,
        "box": {
            "top": box.top_px,
            "height": box.height_px,
            "left": box.left_px,
            "width": box.width_px,
        },
        "session": session_to_record(o.session),
    }


def build_week_view(
    sessions: Sequence[Session],
    week_index: int,
    *,
    cfg: Optional[GridConfig] = None,
    today: Optional[dt.date] = None,
    selected_day: Optional[dt.date] = None,
    column_width: float = 100.0,
    window: Optional[NavigableWindow] = None,
) -> Dict[str, Any]:
    """Render-ready description of one navigable week.

    `week_index` is clamped into the window. `selected_day` falls back to today
    (when shown) or the first day of the week. Pass a cached `window` to skip
    re-resolving an unchanged snapshot.
    """
    cfg = cfg or GridConfig()
    today = today or dt.date.today()
    snapshot = list(sessions)
    win = window or resolve(snapshot, today=today, week_start_weekday=cfg.week_start_weekday)

    idx = clamp_week(win, week_index)
    first = win.week_start_for(idx)
    buckets = bin_week(snapshot, first, week_start=cfg.week_start_weekday)

    if selected_day is None or not (first <= selected_day <= first + dt.timedelta(days=6)):
        selected_day = default_day(win, idx, today=today)

    days: List[Dict[str, Any]] = []
    occurrence_count = 0
    collision_count = 0
    for weekday in range(7):
        day = first + dt.timedelta(days=weekday)
        placed = layout_day(buckets[weekday])
        items = [_item(p, cfg, column_width) for p in placed]
        occurrence_count += len(items)
        collision_count += sum(1 for it in items if it["overlap"])
        days.append(
            {
                "weekday": weekday,
                "date_iso": day.isoformat(),
                "is_today": day == today,
                "is_selected": day == selected_day,
                "count": len(items),
                "items": items,
            }
        )

    return {
        "window": {
            "earliest": win.earliest_date.isoformat(),
            "latest": win.latest_date.isoformat(),
            "week_zero_start": win.week_zero_start.isoformat(),
            "week_count": win.week_count,
        },
        "week_index": idx,
        "week_start": first.isoformat(),
        "week_end": (first + dt.timedelta(days=6)).isoformat(),
        "can_go_previous": can_go_previous(win, idx),
        "can_go_next": can_go_next(win, idx),
        "selected_day": selected_day.isoformat(),
        "grid": {
            "start_hour": cfg.grid_start_hour,
            "px_per_hour": cfg.px_per_hour,
            "min_height_px": cfg.min_height_px,
            "column_width": float(column_width),
        },
        "summary": {
            "occurrence_count": occurrence_count,
            "collision_count": collision_count,
        },
        "days": days,
    }


def dumps_view(view: Dict[str, Any]) -> str:
    if not isinstance(view, dict):
        raise TypeError(f"view must be dict, got {type(view).__name__}")
    if orjson is not None:
        return orjson.dumps(view).decode("utf-8")
    return json.dumps(view, ensure_ascii=False, separators=(",", ":"))


__all__ = [
    "build_week_view",
    "dumps_view",
]
