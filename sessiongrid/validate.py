"""Snapshot validation helpers (library-facing).

The engine itself never rejects data; these helpers let the caller report
records that will silently contribute no occurrences.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .util.timeparse import parse_hhmm, parse_local_datetime


class SessionValidationError(ValueError):
    """Raised by assert_valid_sessions() when a snapshot has issues."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _parses_dt(v: Any) -> bool:
    if not isinstance(v, str) or not v.strip():
        return False
    try:
        parse_local_datetime(v)
    except ValueError:
        return False
    return True


def _parses_hhmm(v: Any) -> bool:
    if not isinstance(v, str):
        return False
    try:
        parse_hhmm(v)
    except ValueError:
        return False
    return True


def validate_record(
    rec: Any,
    *,
    label: str = "session",
    day_names: Optional[Mapping[str, int]] = None,
) -> List[str]:
    if not isinstance(rec, dict):
        return [f"{label}: must be dict"]

    errs: List[str] = []
    sid = rec.get("id")
    _require(isinstance(sid, str) and bool(sid.strip()), f"{label}.id must be non-empty string", errs)

    kind = rec.get("type")
    _require(kind in ("recurring", "single"), f"{label}.type must be 'recurring' or 'single'", errs)

    start = rec.get("startDateTime")
    _require(_parses_dt(start), f"{label}.startDateTime must be an ISO date-time", errs)

    end = rec.get("endDateTime")
    if end not in (None, ""):
        _require(_parses_dt(end), f"{label}.endDateTime must be an ISO date-time", errs)

    if kind == "recurring":
        day = rec.get("day")
        if isinstance(day, str) and day_names and day in day_names:
            day = day_names[day]
        elif isinstance(day, str):
            try:
                day = int(day.strip())
            except ValueError:
                pass
        _require(
            isinstance(day, int) and not isinstance(day, bool) and 0 <= day <= 6,
            f"{label}.day must be a weekday index in 0..6",
            errs,
        )
        t = rec.get("sessionTime") or rec.get("time")
        _require(_parses_hhmm(t), f"{label}.sessionTime must be HH:MM", errs)

        if _parses_dt(start) and _parses_dt(end):
            s_d = parse_local_datetime(start).date()
            e_d = parse_local_datetime(end).date()
            _require(e_d >= s_d, f"{label}: endDateTime is before startDateTime (no occurrences)", errs)

    dur = rec.get("duration")
    if dur is not None:
        _require(
            isinstance(dur, (int, float)) and not isinstance(dur, bool) and dur > 0,
            f"{label}.duration must be a positive number of minutes",
            errs,
        )

    return errs


def validate_sessions(
    records: Any,
    *,
    label: str = "sessions",
    day_names: Optional[Mapping[str, int]] = None,
) -> List[str]:
    """Return every issue found in a snapshot of store records (never raises)."""
    if not isinstance(records, list):
        return [f"{label}: must be a list"]

    errs: List[str] = []
    seen: Dict[str, int] = {}
    for i, rec in enumerate(records):
        errs.extend(validate_record(rec, label=f"{label}[{i}]", day_names=day_names))
        if isinstance(rec, dict) and isinstance(rec.get("id"), str):
            sid = rec["id"]
            if sid in seen:
                errs.append(f"{label}[{i}].id duplicates {label}[{seen[sid]}].id ({sid!r})")
            else:
                seen[sid] = i
    return errs


def assert_valid_sessions(records: Any, *, day_names: Optional[Mapping[str, int]] = None) -> None:
    errs = validate_sessions(records, day_names=day_names)
    if errs:
        raise SessionValidationError(errs[0])


__all__ = [
    "SessionValidationError",
    "assert_valid_sessions",
    "validate_record",
    "validate_sessions",
]
