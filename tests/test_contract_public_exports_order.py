from __future__ import annotations

import unittest

import sessiongrid.api as api

# Engine stage -> module that owns it -> names it must publish.
ENGINE_GROUPS = {
    "sessiongrid.recurrence": ("occurs_on", "occurrences_between"),
    "sessiongrid.window": (
        "NavigableWindow",
        "resolve",
        "clamp_week",
        "can_go_next",
        "can_go_previous",
        "next_week",
        "previous_week",
        "next_day",
        "previous_day",
        "default_day",
    ),
    "sessiongrid.binning": ("bin_day", "bin_week", "group_by_time"),
    "sessiongrid.layout": ("LayoutError", "layout", "layout_day", "layout_overlapping", "place"),
    "sessiongrid.related": ("related_to",),
}


class TestPublicExportsContract(unittest.TestCase):
    def test_exports_are_unique_and_sorted(self) -> None:
        names = list(api._PUBLIC_EXPORTS)
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(names, sorted(names))
        self.assertEqual(api.__all__, [n for n in names if n in api.__dict__])

    def test_every_engine_stage_is_published_from_its_module(self) -> None:
        for module, names in ENGINE_GROUPS.items():
            for name in names:
                self.assertIn(name, api.__all__, f"{module}.{name} is not public")
                self.assertEqual(getattr(api, name).__module__, module, name)

    def test_exports_come_from_this_package(self) -> None:
        for name in api.__all__:
            owner = getattr(getattr(api, name), "__module__", "")
            self.assertTrue(owner.startswith("sessiongrid."), f"{name} is defined in {owner!r}")


if __name__ == "__main__":
    unittest.main(verbosity=2)
