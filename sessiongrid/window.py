# sessiongrid/window.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .model import Session
from .util.weeks import DAYS_PER_WEEK, SATURDAY, week_dates, week_start, weeks_between


@dataclass(frozen=True)
class NavigableWindow:
    earliest_date: dt.date
    latest_date: dt.date
    week_zero_start: dt.date
    week_start_weekday: int = SATURDAY

    def week_index(self, d: dt.date) -> int:
        return weeks_between(self.week_zero_start, d, self.week_start_weekday)

    @property
    def last_week_index(self) -> int:
        return self.week_index(self.latest_date)

    @property
    def week_count(self) -> int:
        return self.last_week_index + 1

    def week_start_for(self, index: int) -> dt.date:
        return self.week_zero_start + dt.timedelta(days=DAYS_PER_WEEK * int(index))

    @property
    def first_day(self) -> dt.date:
        return self.week_zero_start

    @property
    def last_day(self) -> dt.date:
        return self.week_start_for(self.last_week_index) + dt.timedelta(days=DAYS_PER_WEEK - 1)


def _usable_start(s: Session) -> Optional[dt.date]:
    v = s.start
    if isinstance(v, dt.datetime):
        return v.date()
    if isinstance(v, dt.date):
        return v
    return None


def _usable_end(s: Session) -> Optional[dt.date]:
    v = s.end
    if isinstance(v, dt.datetime):
        return v.date()
    if isinstance(v, dt.date):
        return v
    return None


def resolve(
    sessions: Iterable[Session],
    *,
    today: Optional[dt.date] = None,
    week_start_weekday: int = SATURDAY,
) -> NavigableWindow:
    """Derive the navigable window for a session snapshot.

    earliest = min start date over sessions that have one.
    latest   = max of: recurring end date (or the session's own start when open-ended),
               single start date.
    Open-ended recurring sessions never push the window past data that exists.
    An empty/unusable snapshot degenerates to a one-week window around `today`.
    """
    earliest: Optional[dt.date] = None
    latest: Optional[dt.date] = None

    for s in sessions:
        if not isinstance(s, Session):
            continue
        start_d = _usable_start(s)
        if start_d is None:
            continue

        if earliest is None or start_d < earliest:
            earliest = start_d

        upper = start_d
        if s.is_recurring:
            end_d = _usable_end(s)
            if end_d is not None and end_d >= start_d:
                upper = end_d
        if latest is None or upper > latest:
            latest = upper

    if earliest is None or latest is None:
        anchor = today or dt.date.today()
        earliest = latest = anchor

    return NavigableWindow(
        earliest_date=earliest,
        latest_date=latest,
        week_zero_start=week_start(earliest, week_start_weekday),
        week_start_weekday=int(week_start_weekday),
    )


# --- week navigation ---------------------------------------------------------


def clamp_week(window: NavigableWindow, index: int) -> int:
    return max(0, min(int(index), window.last_week_index))


def can_go_previous(window: NavigableWindow, index: int) -> bool:
    return clamp_week(window, index) > 0


def can_go_next(window: NavigableWindow, index: int) -> bool:
    return clamp_week(window, index) < window.last_week_index


def next_week(window: NavigableWindow, index: int) -> Optional[int]:
    if not can_go_next(window, index):
        return None
    return clamp_week(window, index) + 1


def previous_week(window: NavigableWindow, index: int) -> Optional[int]:
    if not can_go_previous(window, index):
        return None
    return clamp_week(window, index) - 1


def dates_of_week(window: NavigableWindow, index: int) -> List[dt.date]:
    return week_dates(window.week_start_for(clamp_week(window, index)))


# --- day navigation ----------------------------------------------------------


def default_day(window: NavigableWindow, index: int, *, today: Optional[dt.date] = None) -> dt.date:
    """Today when it falls inside the displayed week, otherwise the week's first day."""
    days = dates_of_week(window, index)
    today = today or dt.date.today()
    if today in days:
        return today
    return days[0]


def next_day(window: NavigableWindow, day: dt.date) -> Optional[dt.date]:
    if day >= window.last_day:
        return None
    return max(day + dt.timedelta(days=1), window.first_day)


def previous_day(window: NavigableWindow, day: dt.date) -> Optional[dt.date]:
    if day <= window.first_day:
        return None
    return min(day - dt.timedelta(days=1), window.last_day)


__all__ = [
    "NavigableWindow",
    "can_go_next",
    "can_go_previous",
    "clamp_week",
    "dates_of_week",
    "default_day",
    "next_day",
    "next_week",
    "previous_day",
    "previous_week",
    "resolve",
]
