# sessiongrid/binning.py
from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Sequence

from .model import Occurrence, Session
from .recurrence import occurrence_on
from .util.weeks import SATURDAY, week_dates
from .util.weeks import week_start as week_start_of


def _occ_key(o: Occurrence) -> tuple:
    return (o.start_time, o.session.id)


def bin_day(sessions: Iterable[Session], day: dt.date, *, week_start: int = SATURDAY) -> List[Occurrence]:
    """All occurrences on `day`, sorted by (start time, session id)."""
    out: List[Occurrence] = []
    for s in sessions:
        if not isinstance(s, Session):
            continue
        occ = occurrence_on(s, day, week_start=week_start)
        if occ is not None:
            out.append(occ)
    out.sort(key=_occ_key)
    return out


def bin_week(
    sessions: Sequence[Session],
    first_day: dt.date,
    *,
    week_start: int = SATURDAY,
) -> Dict[int, List[Occurrence]]:
    """Occurrences for the week containing `first_day`, keyed by grid weekday 0..6.

    Any day of the week may be passed; it is moved back to the week start.
    Every key is present, so an empty snapshot yields seven empty buckets.
    """
    snapshot = list(sessions)
    first = week_start_of(first_day, week_start)
    return {
        idx: bin_day(snapshot, day, week_start=week_start)
        for idx, day in enumerate(week_dates(first))
    }


def group_by_time(occurrences: Iterable[Occurrence]) -> List[List[Occurrence]]:
    """Split one day's occurrences into time-groups (identical date and start minute).

    Groups come back in ascending start order; members in session id order.
    """
    groups: Dict[tuple, List[Occurrence]] = {}
    for o in occurrences:
        groups.setdefault((o.date, o.start_min), []).append(o)
    return [sorted(groups[k], key=lambda o: o.session.id) for k in sorted(groups)]


__all__ = [
    "bin_day",
    "bin_week",
    "group_by_time",
]
