# sessiongrid/normalize.py
from __future__ import annotations

import datetime as dt
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .model import RECURRING, SINGLE, Session
from .util.console import eprint
from .util.timeparse import parse_local_datetime, parse_time_of_day


def _obs_enabled() -> bool:
    v = (os.getenv("SESSIONGRID_OBS_LOG", "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def _warn(msg: str) -> None:
    if _obs_enabled():
        eprint(f"[sessiongrid.normalize] WARN: {msg}")


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _parse_dt(raw: Any, *, sid: str, field: str) -> Optional[dt.datetime]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, dt.datetime):
        return raw.replace(tzinfo=None)
    if isinstance(raw, dt.date):
        return dt.datetime(raw.year, raw.month, raw.day)
    try:
        return parse_local_datetime(str(raw))
    except ValueError:
        _warn(f"invalid {field} id={sid!r} value={raw!r}")
        return None


def _parse_weekday(raw: Any, *, sid: str, day_names: Optional[Mapping[str, int]]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        _warn(f"invalid day id={sid!r} value={raw!r}")
        return None
    if isinstance(raw, int):
        wd = raw
    else:
        s = str(raw).strip()
        if day_names and s in day_names:
            wd = day_names[s]
        else:
            try:
                wd = int(s)
            except ValueError:
                _warn(f"unknown day id={sid!r} value={raw!r}")
                return None
    if isinstance(wd, bool) or not isinstance(wd, int) or not (0 <= wd <= 6):
        _warn(f"day out of range id={sid!r} value={raw!r}")
        return None
    return wd


def _parse_time(raw: Any, *, sid: str) -> Optional[dt.time]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, dt.time):
        return raw.replace(second=0, microsecond=0, tzinfo=None)
    try:
        return parse_time_of_day(str(raw))
    except ValueError:
        _warn(f"invalid time id={sid!r} value={raw!r}")
        return None


def normalize_session(
    rec: Mapping[str, Any],
    *,
    day_names: Optional[Mapping[str, int]] = None,
) -> Optional[Session]:
    """Convert one store record into a Session.

    Returns None only when the record has no id or an unknown type. Bad field
    values are dropped to None, which the expander treats as "no occurrences".
    `day_names` maps caller-supplied day labels to grid weekday indices.
    """
    if not isinstance(rec, Mapping):
        return None

    sid = str(rec.get("id") or "").strip()
    if not sid:
        return None

    kind_raw = str(rec.get("type") or rec.get("kind") or "").strip().lower()
    if kind_raw not in (RECURRING, SINGLE):
        _warn(f"unknown session type id={sid!r} value={rec.get('type')!r}")
        return None

    start = _parse_dt(rec.get("startDateTime"), sid=sid, field="startDateTime")
    end = _parse_dt(rec.get("endDateTime"), sid=sid, field="endDateTime")

    weekday = None
    time_of_day = None
    if kind_raw == RECURRING:
        weekday = _parse_weekday(rec.get("day"), sid=sid, day_names=day_names)
        time_of_day = _parse_time(rec.get("sessionTime") or rec.get("time"), sid=sid)
        if start is not None and end is not None and end.date() < start.date():
            _warn(f"endDateTime before startDateTime id={sid!r}")
    elif start is not None:
        time_of_day = dt.time(start.hour, start.minute)

    duration = rec.get("duration")
    if isinstance(duration, bool) or not isinstance(duration, (int, float)) or duration <= 0:
        if duration is not None:
            _warn(f"invalid duration id={sid!r} value={duration!r}")
        duration = None

    return Session(
        id=sid,
        kind=RECURRING if kind_raw == RECURRING else SINGLE,
        subject=str(rec.get("subject") or ""),
        teacher_name=str(rec.get("teacherName") or rec.get("teacher") or ""),
        grade=str(rec.get("grade") or ""),
        teacher_id=_opt_str(rec.get("teacherId")),
        weekday=weekday,
        time_of_day=time_of_day,
        start=start,
        end=end,
        duration_min=None if duration is None else int(duration),
        notes=_opt_str(rec.get("notes")),
        color=_opt_str(rec.get("color")),
    )


def normalize_sessions(
    records: Iterable[Mapping[str, Any]],
    *,
    day_names: Optional[Mapping[str, int]] = None,
) -> List[Session]:
    """Normalize a snapshot, keeping input order and skipping unusable records."""
    out: List[Session] = []
    for rec in records or []:
        s = normalize_session(rec, day_names=day_names)
        if s is not None:
            out.append(s)
    return out


def session_to_record(s: Session) -> Dict[str, Any]:
    """Inverse of normalize_session for the fields the store carries."""
    rec: Dict[str, Any] = {
        "id": s.id,
        "type": s.kind,
        "subject": s.subject,
        "teacherName": s.teacher_name,
        "grade": s.grade,
    }
    if s.teacher_id is not None:
        rec["teacherId"] = s.teacher_id
    if s.is_recurring:
        if s.weekday is not None:
            rec["day"] = s.weekday
        if s.time_of_day is not None:
            rec["sessionTime"] = f"{s.time_of_day.hour:02d}:{s.time_of_day.minute:02d}"
    if s.start is not None:
        rec["startDateTime"] = s.start.isoformat(timespec="minutes")
    if s.end is not None:
        rec["endDateTime"] = s.end.isoformat(timespec="minutes")
    if s.duration_min is not None:
        rec["duration"] = s.duration_min
    if s.notes is not None:
        rec["notes"] = s.notes
    if s.color is not None:
        rec["color"] = s.color
    return rec


__all__ = [
    "normalize_session",
    "normalize_sessions",
    "session_to_record",
]
