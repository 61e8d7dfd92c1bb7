# sessiongrid/related.py
from __future__ import annotations

from typing import Iterable, List

from .model import Session


def _same_class(a: Session, b: Session) -> bool:
    return a.subject == b.subject and a.grade == b.grade and a.teacher_name == b.teacher_name


def related_to(session: Session, sessions: Iterable[Session]) -> List[Session]:
    """Sibling weekly sessions: same subject, grade and teacher on another weekday.

    Single sessions have no siblings. Result is ordered by (weekday, id).
    """
    if not isinstance(session, Session) or not session.is_recurring:
        return []

    out: List[Session] = []
    for s in sessions:
        if not isinstance(s, Session) or not s.is_recurring:
            continue
        if s.id == session.id:
            continue
        if s.weekday == session.weekday:
            continue
        if _same_class(s, session):
            out.append(s)

    out.sort(key=lambda s: (s.weekday if isinstance(s.weekday, int) else 7, s.id))
    return out


__all__ = ["related_to"]
