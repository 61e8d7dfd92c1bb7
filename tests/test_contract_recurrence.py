from __future__ import annotations

import datetime as dt
import unittest

from sessiongrid.model import Session
from sessiongrid.recurrence import occurrences_between, occurs_on

TUESDAY = 3  # Saturday-anchored grid weekday


def _weekly(**kw) -> Session:
    base = dict(
        id="r1",
        kind="recurring",
        subject="Math",
        teacher_name="T1",
        grade="G10",
        weekday=TUESDAY,
        time_of_day=dt.time(14, 0),
        start=dt.datetime(2026, 1, 6),
    )
    base.update(kw)
    return Session(**base)


class TestRecurrenceContract(unittest.TestCase):
    def test_open_ended_weekly_session(self) -> None:
        s = _weekly()
        self.assertEqual(occurs_on(s, dt.date(2026, 1, 13)), dt.time(14, 0))
        self.assertEqual(occurs_on(s, dt.date(2026, 1, 6)), dt.time(14, 0))
        self.assertIsNone(occurs_on(s, dt.date(2026, 1, 5)))
        self.assertIsNone(occurs_on(s, dt.date(2025, 12, 30)))

    def test_end_date_is_inclusive_and_bounds_occurrences(self) -> None:
        s = _weekly(end=dt.datetime(2026, 1, 20))
        self.assertEqual(occurs_on(s, dt.date(2026, 1, 20)), dt.time(14, 0))
        self.assertIsNone(occurs_on(s, dt.date(2026, 1, 27)))

    def test_range_compares_calendar_dates_not_times(self) -> None:
        s = _weekly(start=dt.datetime(2026, 1, 6, 18, 30), end=dt.datetime(2026, 1, 20, 9, 0))
        self.assertEqual(occurs_on(s, dt.date(2026, 1, 6)), dt.time(14, 0))
        self.assertEqual(occurs_on(s, dt.date(2026, 1, 20)), dt.time(14, 0))

    def test_inverted_range_has_no_occurrences(self) -> None:
        s = _weekly(start=dt.datetime(2026, 1, 20), end=dt.datetime(2026, 1, 6))
        self.assertIsNone(occurs_on(s, dt.date(2026, 1, 13)))
        self.assertIsNone(occurs_on(s, dt.date(2026, 1, 20)))
        self.assertEqual(list(occurrences_between(s, dt.date(2026, 1, 1), dt.date(2026, 2, 28))), [])

    def test_missing_or_out_of_range_weekday_is_excluded(self) -> None:
        self.assertIsNone(occurs_on(_weekly(weekday=None), dt.date(2026, 1, 13)))
        self.assertIsNone(occurs_on(_weekly(weekday=7), dt.date(2026, 1, 13)))
        self.assertIsNone(occurs_on(_weekly(weekday=-1), dt.date(2026, 1, 13)))

    def test_missing_time_or_start_is_excluded(self) -> None:
        self.assertIsNone(occurs_on(_weekly(time_of_day=None), dt.date(2026, 1, 13)))
        self.assertIsNone(occurs_on(_weekly(start=None), dt.date(2026, 1, 13)))

    def test_single_session_occurs_once(self) -> None:
        s = Session(id="s1", kind="single", start=dt.datetime(2026, 2, 10, 16, 30))
        self.assertEqual(occurs_on(s, dt.date(2026, 2, 10)), dt.time(16, 30))
        self.assertIsNone(occurs_on(s, dt.date(2026, 2, 17)))
        self.assertIsNone(occurs_on(s, dt.date(2026, 2, 9)))

        occ = list(occurrences_between(s, dt.date(2026, 1, 1), dt.date(2026, 12, 31)))
        self.assertEqual(len(occ), 1)
        self.assertEqual(occ[0].date, dt.date(2026, 2, 10))
        self.assertEqual(list(occurrences_between(s, dt.date(2026, 3, 1), dt.date(2026, 3, 31))), [])

    def test_occurrences_stay_inside_range_and_weekday(self) -> None:
        start = dt.date(2026, 1, 6)
        end = dt.date(2026, 3, 3)
        s = _weekly(end=dt.datetime(2026, 3, 3))

        occ = list(occurrences_between(s, dt.date(2025, 12, 1), dt.date(2026, 4, 30)))
        self.assertEqual(len(occ), 9)
        for o in occ:
            self.assertTrue(start <= o.date <= end)
            self.assertEqual(o.date.weekday(), 1)  # Python Tuesday
            self.assertEqual(o.start_time, dt.time(14, 0))

        # every day in range agrees with occurs_on
        day = dt.date(2025, 12, 1)
        hits = []
        while day <= dt.date(2026, 4, 30):
            if occurs_on(s, day) is not None:
                hits.append(day)
            day += dt.timedelta(days=1)
        self.assertEqual(hits, [o.date for o in occ])

    def test_custom_week_start(self) -> None:
        # Monday-anchored grid: Tuesday becomes index 1.
        s = _weekly(weekday=1)
        self.assertEqual(occurs_on(s, dt.date(2026, 1, 13), week_start=0), dt.time(14, 0))
        self.assertIsNone(occurs_on(s, dt.date(2026, 1, 13)))


if __name__ == "__main__":
    unittest.main(verbosity=2)
