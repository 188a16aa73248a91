from __future__ import annotations

import pytest

from widgets.visibility import (
    IntersectionEntry, SectionBox, SectionVisibilityTracker, parse_scroll_report, visible_ratio,
)

LAYOUT = [
    SectionBox("home", 0, 800),
    SectionBox("about", 800, 800),
    SectionBox("projects", 1600, 1200),
]


def _tracker(**kwargs) -> SectionVisibilityTracker:
    tracker = SectionVisibilityTracker(**kwargs)
    tracker.observe(["home", "about", "projects"])
    return tracker


def test_section_over_threshold_becomes_active() -> None:
    tracker = _tracker()
    assert tracker.handle([IntersectionEntry("about", 0.6)]) == "about"


def test_intersecting_entry_below_threshold_becomes_active() -> None:
    tracker = _tracker()
    assert tracker.handle([IntersectionEntry("about", 0.4)]) == "about"


def test_entry_that_left_the_viewport_is_ignored() -> None:
    tracker = _tracker()
    assert tracker.handle([IntersectionEntry("about", 0.0, is_intersecting=False)]) == "home"


def test_last_entry_in_delivery_order_wins() -> None:
    tracker = _tracker()
    tracker.handle([IntersectionEntry("projects", 0.7), IntersectionEntry("about", 0.5)])
    assert tracker.active == "about"


def test_unobserved_sections_and_disconnect() -> None:
    tracker = _tracker()
    tracker.handle([IntersectionEntry("footer", 1.0)])
    assert tracker.active == "home"

    tracker.disconnect()
    assert tracker.observed == []
    tracker.handle([IntersectionEntry("about", 1.0)])
    assert tracker.active == "home"


def test_on_change_fires_only_on_change() -> None:
    seen = []
    tracker = _tracker(on_change=seen.append)
    tracker.handle([IntersectionEntry("home", 1.0)])
    tracker.handle([IntersectionEntry("about", 1.0)])
    tracker.handle([IntersectionEntry("about", 1.0)])
    assert seen == ["about"]


def test_visible_ratio() -> None:
    assert visible_ratio(LAYOUT[0], 0, 800) == 1.0
    assert visible_ratio(LAYOUT[1], 1000, 800) == pytest.approx(0.75)
    assert visible_ratio(LAYOUT[2], 0, 800) == 0.0
    assert visible_ratio(SectionBox("empty", 10, 0), 0, 800) == 0.0


def test_scroll_reports_threshold_crossings() -> None:
    tracker = _tracker()
    assert tracker.scroll(LAYOUT, 0, 800) == "home"
    assert tracker.scroll(LAYOUT, 800, 800) == "about"
    # about stays above the threshold, projects only 1/6 visible: nothing crosses
    assert tracker.scroll(LAYOUT, 1000, 800) == "about"
    assert tracker.scroll(LAYOUT, 1700, 800) == "projects"


def test_first_scroll_delivers_every_observed_section() -> None:
    seen = []
    tracker = _tracker(on_change=seen.append)
    # every section gets an initial entry; projects is partly on screen and comes last
    assert tracker.scroll(LAYOUT, 0, 2000) == "projects"
    assert seen == ["about", "projects"]
    # nothing crosses afterwards, so nothing is delivered
    tracker.handle([IntersectionEntry("about", 1.0)])
    assert tracker.scroll(LAYOUT, 0, 2000) == "about"


def test_section_crossing_down_while_visible_stays_active() -> None:
    layout = [SectionBox("about", 1000, 1000), SectionBox("contact", 2000, 1000)]
    tracker = SectionVisibilityTracker(initial="about")
    tracker.observe(["about", "contact"])

    # about 0.4, contact 0.6
    assert tracker.scroll(layout, 1600, 1000) == "contact"
    # about crosses up to 0.6, contact crosses down to 0.4 but is still on screen
    assert tracker.scroll(layout, 1400, 1000) == "contact"


def test_parse_scroll_report() -> None:
    report = parse_scroll_report({
        "layout": [["home", -120, 800], ["about", 680.5, 900]],
        "scroll_top": 0,
        "viewport_height": 900,
    })
    assert report == ([SectionBox("home", -120.0, 800.0), SectionBox("about", 680.5, 900.0)], 0.0, 900.0)

    tracker = _tracker()
    assert tracker.scroll(*report) == "about"


@pytest.mark.parametrize("value", [None, [], {"layout": [["home", 0]]}, {"layout": [], "scroll_top": 0}])
def test_parse_scroll_report_rejects_malformed_values(value) -> None:
    assert parse_scroll_report(value) is None
