# sessiongrid/recurrence.py
from __future__ import annotations

import datetime as dt
from typing import Iterator, Optional

from .model import Occurrence, Session
from .util.weeks import SATURDAY, grid_weekday


def _as_date(value: object) -> Optional[dt.date]:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return None


def _valid_weekday(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 6


def occurs_on(session: Session, day: dt.date, *, week_start: int = SATURDAY) -> Optional[dt.time]:
    """Return the wall-clock start of `session` on `day`, or None if it does not occur.

    Single: matches the calendar date of `start` only.
    Recurring: matches `weekday` within [start.date(), end.date()] (end optional, inclusive).
    All range checks compare calendar dates, never times.
    """
    day = _as_date(day)
    if day is None:
        return None

    start_d = _as_date(session.start)
    if start_d is None:
        return None

    if session.is_single:
        if day != start_d:
            return None
        if not isinstance(session.start, dt.datetime):
            return dt.time(0, 0)
        return dt.time(session.start.hour, session.start.minute)

    if not session.is_recurring:
        return None
    if not _valid_weekday(session.weekday):
        return None
    if not isinstance(session.time_of_day, dt.time):
        return None

    end_d = _as_date(session.end)
    if end_d is not None and end_d < start_d:
        # inverted range: zero occurrences
        return None

    if grid_weekday(day, week_start) != session.weekday:
        return None
    if day < start_d:
        return None
    if end_d is not None and day > end_d:
        return None

    t = session.time_of_day
    return dt.time(t.hour, t.minute)


def occurrence_on(session: Session, day: dt.date, *, week_start: int = SATURDAY) -> Optional[Occurrence]:
    t = occurs_on(session, day, week_start=week_start)
    if t is None:
        return None
    return Occurrence(session=session, date=_as_date(day), start_time=t)


def occurrences_between(
    session: Session,
    first: dt.date,
    last: dt.date,
    *,
    week_start: int = SATURDAY,
) -> Iterator[Occurrence]:
    """Yield every occurrence of `session` in the inclusive date range [first, last]."""
    first_d = _as_date(first)
    last_d = _as_date(last)
    if first_d is None or last_d is None or last_d < first_d:
        return

    if session.is_single:
        occ = occurrence_on(session, _as_date(session.start) or first_d, week_start=week_start)
        if occ is not None and first_d <= occ.date <= last_d:
            yield occ
        return

    if not _valid_weekday(session.weekday):
        return

    # First matching weekday at or after `first`, then step a week at a time.
    offset = (session.weekday - grid_weekday(first_d, week_start)) % 7
    day = first_d + dt.timedelta(days=offset)
    while day <= last_d:
        occ = occurrence_on(session, day, week_start=week_start)
        if occ is not None:
            yield occ
        day += dt.timedelta(days=7)


__all__ = [
    "occurrence_on",
    "occurrences_between",
    "occurs_on",
]
