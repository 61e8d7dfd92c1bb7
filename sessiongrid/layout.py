# sessiongrid/layout.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .binning import group_by_time
from .config import DEFAULT_DURATION_MIN, GridConfig
from .model import Box, Occurrence, Placement


class LayoutError(ValueError):
    """Raised when layout() is handed occurrences that are not one time-group."""


def layout(time_group: Sequence[Occurrence]) -> List[Placement]:
    """Assign lanes to a single time-group.

    lane_count is the group size; lane_index follows the input order.
    Only exact start-time collisions are separated; partially overlapping
    sessions with different start times are left to share the column.
    """
    group = list(time_group)
    if not group:
        return []

    first = group[0]
    for o in group[1:]:
        if o.date != first.date or o.start_min != first.start_min:
            raise LayoutError(
                f"time-group mixes start times: {first.date.isoformat()} {first.start_min}min "
                f"vs {o.date.isoformat()} {o.start_min}min (session {o.session.id!r})"
            )

    n = len(group)
    return [Placement(occurrence=o, lane_index=i, lane_count=n) for i, o in enumerate(group)]


def layout_day(day_occurrences: Iterable[Occurrence]) -> List[Placement]:
    out: List[Placement] = []
    for group in group_by_time(day_occurrences):
        out.extend(layout(group))
    return out


def layout_overlapping(
    day_occurrences: Iterable[Occurrence],
    *,
    default_duration_min: int = DEFAULT_DURATION_MIN,
) -> List[Placement]:
    """Interval-sweep alternative to layout_day().

    Occurrences whose [start, start+duration) intervals intersect share a cluster;
    each takes the smallest free lane and every member reports the cluster's lane count.
    """
    items = sorted(
        day_occurrences,
        key=lambda o: (o.date, o.start_min, o.start_min + o.duration_min(default_duration_min), o.session.id),
    )

    clusters: List[List[Tuple[Occurrence, int]]] = []
    cur: List[Tuple[Occurrence, int]] = []
    max_end = -1
    cur_date = None
    for o in items:
        end = o.start_min + o.duration_min(default_duration_min)
        if cur and o.date == cur_date and o.start_min < max_end:
            cur.append((o, end))
            max_end = max(max_end, end)
            continue
        if cur:
            clusters.append(cur)
        cur = [(o, end)]
        max_end = end
        cur_date = o.date
    if cur:
        clusters.append(cur)

    out: List[Placement] = []
    for cluster in clusters:
        lanes: List[int] = []
        assigned: List[Tuple[Occurrence, int]] = []
        for o, end in cluster:
            lane_index = -1
            for i, lane_end in enumerate(lanes):
                if lane_end <= o.start_min:
                    lane_index = i
                    break
            if lane_index < 0:
                lane_index = len(lanes)
                lanes.append(end)
            else:
                lanes[lane_index] = end
            assigned.append((o, lane_index))
        total = max(1, len(lanes))
        out.extend(Placement(occurrence=o, lane_index=lane, lane_count=total) for o, lane in assigned)
    return out


def place(placement: Placement, cfg: Optional[GridConfig] = None, *, column_width: float = 100.0) -> Box:
    """Pixel box for a placed occurrence inside one day column.

    top    = minutes after grid start * px_per_min
    height = duration * px_per_min, floored at cfg.min_height_px
    left/width split the column evenly between lanes.
    """
    cfg = cfg or GridConfig()
    o = placement.occurrence
    px_per_min = cfg.px_per_min

    offset_min = (o.start_time.hour - cfg.grid_start_hour) * 60 + o.start_time.minute
    top = offset_min * px_per_min
    height = max(o.duration_min(cfg.default_duration_min) * px_per_min, float(cfg.min_height_px))

    lanes = max(1, int(placement.lane_count))
    width = float(column_width) / lanes
    left = int(placement.lane_index) * width

    return Box(top_px=float(top), height_px=float(height), left_px=float(left), width_px=float(width))


__all__ = [
    "LayoutError",
    "layout",
    "layout_day",
    "layout_overlapping",
    "place",
]
