# sessiongrid/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Literal, Optional

from .config import DEFAULT_DURATION_MIN
from .util.timeparse import minutes_of_day

SessionKind = Literal["recurring", "single"]

RECURRING: SessionKind = "recurring"
SINGLE: SessionKind = "single"


@dataclass(frozen=True)
class Session:
    id: str
    kind: SessionKind
    subject: str = ""
    teacher_name: str = ""
    grade: str = ""
    teacher_id: Optional[str] = None

    weekday: Optional[int] = None          # grid weekday (Saturday=0 by default); recurring only
    time_of_day: Optional[dt.time] = None  # recurring only; single derives it from start

    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None

    duration_min: Optional[int] = None
    notes: Optional[str] = None
    color: Optional[str] = None

    @property
    def is_recurring(self) -> bool:
        return self.kind == RECURRING

    @property
    def is_single(self) -> bool:
        return self.kind == SINGLE

    def effective_duration(self, default_duration_min: int = DEFAULT_DURATION_MIN) -> int:
        if isinstance(self.duration_min, int) and self.duration_min > 0:
            return int(self.duration_min)
        return int(default_duration_min)


@dataclass(frozen=True)
class Occurrence:
    session: Session
    date: dt.date
    start_time: dt.time

    @property
    def start_min(self) -> int:
        return minutes_of_day(self.start_time)

    def duration_min(self, default_duration_min: int = DEFAULT_DURATION_MIN) -> int:
        return self.session.effective_duration(default_duration_min)


@dataclass(frozen=True)
class Placement:
    occurrence: Occurrence
    lane_index: int
    lane_count: int


@dataclass(frozen=True)
class Box:
    top_px: float
    height_px: float
    left_px: float
    width_px: float


__all__ = [
    "Box",
    "Occurrence",
    "Placement",
    "RECURRING",
    "SINGLE",
    "Session",
    "SessionKind",
]
