# widgets/visibility.py — which page section is "active" for nav highlighting

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import streamlit.components.v1 as components

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntersectionEntry:
    target_id: str
    intersection_ratio: float
    is_intersecting: bool = True


@dataclass(frozen=True)
class SectionBox:
    section_id: str
    top: float
    height: float


def visible_ratio(box: SectionBox, scroll_top: float, viewport_height: float) -> float:
    """Fraction of the section's own height inside the viewport."""
    if box.height <= 0:
        return 0.0
    top = max(box.top, scroll_top)
    bottom = min(box.top + box.height, scroll_top + viewport_height)
    return max(0.0, bottom - top) / box.height


class SectionVisibilityTracker:
    """Observer-style tracker.

    Entries are delivered when a section crosses `threshold` visibility in
    either direction, plus one initial entry per section right after it is
    observed. Any delivered entry that is still intersecting makes its
    section active; when several arrive together the last one wins.
    """

    def __init__(self, threshold: float = 0.5, initial: str = "home",
                 on_change: Optional[Callable[[str], None]] = None):
        self.threshold = threshold
        self.active = initial
        self.on_change = on_change
        self._observed: List[str] = []
        # None until the section's first entry has been delivered
        self._above: Dict[str, Optional[bool]] = {}

    @property
    def observed(self) -> List[str]:
        return list(self._observed)

    def observe(self, section_ids: Iterable[str]):
        for sid in section_ids:
            if sid not in self._observed:
                self._observed.append(sid)
                self._above[sid] = None

    def disconnect(self):
        self._observed.clear()
        self._above.clear()

    def handle(self, entries: Sequence[IntersectionEntry]) -> str:
        for entry in entries:
            if entry.target_id not in self._above:
                continue
            self._above[entry.target_id] = entry.intersection_ratio >= self.threshold
            if entry.is_intersecting:
                self._set_active(entry.target_id)
        return self.active

    def scroll(self, layout: Sequence[SectionBox], scroll_top: float, viewport_height: float) -> str:
        """Deliver entries for sections seen for the first time or whose
        threshold state changed, in layout order."""
        entries = []
        for box in layout:
            if box.section_id not in self._above:
                continue
            ratio = visible_ratio(box, scroll_top, viewport_height)
            above = ratio >= self.threshold
            if above != self._above[box.section_id]:
                entries.append(IntersectionEntry(box.section_id, ratio, ratio > 0))
        if entries:
            self.handle(entries)
        return self.active

    def _set_active(self, section_id: str):
        if section_id == self.active:
            return
        logger.debug("active section: %s -> %s", self.active, section_id)
        self.active = section_id
        if self.on_change is not None:
            self.on_change(section_id)


# -----------------------------
# Browser scroll reports
# -----------------------------
ScrollReport = Tuple[List[SectionBox], float, float]

_scroll_spy = components.declare_component(
    "scroll_spy", path=str(Path(__file__).parent / "scroll_spy")
)


def parse_scroll_report(value: Any) -> Optional[ScrollReport]:
    """Turn the component's JSON value into (layout, scroll_top, viewport_height)."""
    if not isinstance(value, dict):
        return None
    try:
        layout = [SectionBox(str(sid), float(top), float(height)) for sid, top, height in value["layout"]]
        return layout, float(value["scroll_top"]), float(value["viewport_height"])
    except (KeyError, TypeError, ValueError):
        logger.warning("malformed scroll report: %r", value)
        return None


def scroll_spy(section_ids: Sequence[str], anchor_prefix: str = "sec-",
               threshold: float = 0.5, key: str = "scroll_spy") -> Optional[ScrollReport]:
    """Mount the invisible reporter; returns the latest report, if any.

    The browser side measures each section from its anchor to the next one
    and reports only when some section crosses `threshold`, so every report
    costs one rerun.
    """
    value = _scroll_spy(sections=list(section_ids), prefix=anchor_prefix,
                        threshold=threshold, key=key, default=None)
    return parse_scroll_report(value)
