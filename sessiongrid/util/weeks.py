# sessiongrid/util/weeks.py
from __future__ import annotations

import datetime as dt
from typing import List

# Python weekday numbering (Monday=0 ... Sunday=6).
SATURDAY = 5

DAYS_PER_WEEK = 7


def week_start(d: dt.date, start_weekday: int = SATURDAY) -> dt.date:
    """Return the first grid day on or before `d`.

    `start_weekday` uses Python's numbering; the default anchors weeks on Saturday.
    Date-times are truncated to their calendar date (midnight).
    """
    if isinstance(d, dt.datetime):
        d = d.date()
    back = (d.weekday() - int(start_weekday)) % DAYS_PER_WEEK
    return d - dt.timedelta(days=back)


def grid_weekday(d: dt.date, start_weekday: int = SATURDAY) -> int:
    """Weekday index of `d` relative to the week start (Saturday=0 ... Friday=6 by default)."""
    return (d.weekday() - int(start_weekday)) % DAYS_PER_WEEK


def week_dates(first: dt.date) -> List[dt.date]:
    return [first + dt.timedelta(days=i) for i in range(DAYS_PER_WEEK)]


def weeks_between(zero: dt.date, d: dt.date, start_weekday: int = SATURDAY) -> int:
    """Whole weeks from the week starting at `zero` to the week containing `d` (floor)."""
    return (week_start(d, start_weekday) - zero).days // DAYS_PER_WEEK
