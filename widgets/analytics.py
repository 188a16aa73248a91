# widgets/analytics.py — console-style event log + optional gtag forwarding

from __future__ import annotations
import json
import logging
from typing import Any, Callable, Dict, Optional

from streamlit.components.v1 import html as st_html

logger = logging.getLogger(__name__)

Tag = Callable[[str, str, Dict[str, Any]], None]

CONTACT_ACTIONS = {"start", "submit", "error"}
PROJECT_LINKS = {"github", "demo"}


class Analytics:
    def __init__(self, tag: Optional[Tag] = None, measurement_id: Optional[str] = None):
        self.tag = tag
        self.measurement_id = measurement_id or "GA_MEASUREMENT_ID"

    def track_event(self, action: str, category: str, label: Optional[str] = None,
                    value: Optional[float] = None):
        logger.info("Analytics Event: %s", {"action": action, "category": category, "label": label, "value": value})
        if self.tag is not None:
            self.tag("event", action, {"event_category": category, "event_label": label, "value": value})

    def track_page_view(self, url: str):
        logger.info("Page View: %s", url)
        if self.tag is not None:
            self.tag("config", self.measurement_id, {"page_path": url})

    def track_project_view(self, project_title: str):
        self.track_event("view_project", "Portfolio", label=project_title)

    def track_project_click(self, project_title: str, link_type: str):
        if link_type not in PROJECT_LINKS:
            raise ValueError(f"unknown project link type: {link_type}")
        self.track_event("click_project_link", "Portfolio", label=f"{project_title}_{link_type}")

    def track_contact_form(self, action: str):
        if action not in CONTACT_ACTIONS:
            raise ValueError(f"unknown contact form action: {action}")
        self.track_event(f"contact_form_{action}", "Contact")

    def track_navigation(self, section: str):
        self.track_event("navigate", "Navigation", label=section)


# -----------------------------
# Browser gtag bridge
# -----------------------------
def inject_gtag(measurement_id: str):
    """Load gtag.js into the parent page once per render."""
    st_html(
        f"""
<script>
(function(){{
  const win = window.parent;
  const doc = win.document;
  if (win.gtag) return;
  const s = doc.createElement('script');
  s.async = true;
  s.src = 'https://www.googletagmanager.com/gtag/js?id={measurement_id}';
  doc.head.appendChild(s);
  win.dataLayer = win.dataLayer || [];
  win.gtag = function(){{ win.dataLayer.push(arguments); }};
  win.gtag('js', new Date());
  win.gtag('config', '{measurement_id}');
}})();
</script>
""",
        height=0,
    )


def gtag_bridge() -> Tag:
    """A tag that replays the call on the parent window's gtag, if there is one."""
    def tag(command: str, target: str, params: Dict[str, Any]):
        args = json.dumps([command, target, params])
        st_html(
            f"<script>(function(){{const g = window.parent.gtag; if (g) g.apply(null, {args});}})();</script>",
            height=0,
        )
    return tag
