# sessiongrid/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Tuple

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


def parse_hhmm(s: str) -> Tuple[int, int]:
    m = _HHMM_RE.match(s.strip())
    if not m:
        raise ValueError(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise ValueError(f"Invalid HH:MM: {s!r}")
    return hh, mm


def parse_time_of_day(s: str) -> dt.time:
    hh, mm = parse_hhmm(s)
    return dt.time(hh, mm)


def parse_local_datetime(s: str) -> dt.datetime:
    """Parse an ISO-8601 date or date-time as a naive wall-clock value.

    Accepted forms:
      - "2026-01-06"             -> midnight of that date
      - "2026-01-06T14:00"       -> naive date-time
      - "2026-01-06T14:00:00Z"   -> offset dropped (wall clock kept as written)
      - "2026-01-06T14:00:00.000+02:00"

    Raises ValueError on anything else.
    """
    ss = str(s).strip()
    if not ss:
        raise ValueError("empty date-time")
    if ss.endswith("Z") or ss.endswith("z"):
        ss = ss[:-1]
    try:
        value = dt.datetime.fromisoformat(ss)
    except ValueError as ex:
        raise ValueError(f"Invalid ISO date-time: {s!r}") from ex
    return value.replace(tzinfo=None)


def minutes_of_day(t: dt.time) -> int:
    return t.hour * 60 + t.minute


def format_hhmm(t: dt.time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"
