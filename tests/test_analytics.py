from __future__ import annotations

import logging

import pytest

from widgets.analytics import Analytics


def _recording():
    calls = []
    return calls, lambda command, target, params: calls.append((command, target, params))


def test_events_are_logged_without_a_tag(caplog) -> None:
    caplog.set_level(logging.INFO, logger="widgets.analytics")
    analytics = Analytics()
    analytics.track_navigation("projects")
    analytics.track_page_view("/")
    assert "Analytics Event" in caplog.text
    assert "'label': 'projects'" in caplog.text
    assert "Page View: /" in caplog.text


def test_events_are_forwarded_to_tag() -> None:
    calls, tag = _recording()
    analytics = Analytics(tag=tag)
    analytics.track_project_view("NFT Marketplace")
    analytics.track_contact_form("submit")
    assert calls == [
        ("event", "view_project", {"event_category": "Portfolio", "event_label": "NFT Marketplace", "value": None}),
        ("event", "contact_form_submit", {"event_category": "Contact", "event_label": None, "value": None}),
    ]


def test_page_view_uses_measurement_id() -> None:
    calls, tag = _recording()
    Analytics(tag=tag, measurement_id="G-TEST123").track_page_view("/")
    assert calls == [("config", "G-TEST123", {"page_path": "/"})]


def test_project_link_clicks_are_labelled_by_title_and_kind() -> None:
    calls, tag = _recording()
    analytics = Analytics(tag=tag)
    analytics.track_project_click("JustCats", "github")
    analytics.track_project_click("JustCats", "demo")
    assert calls == [
        ("event", "click_project_link", {"event_category": "Portfolio", "event_label": "JustCats_github", "value": None}),
        ("event", "click_project_link", {"event_category": "Portfolio", "event_label": "JustCats_demo", "value": None}),
    ]


def test_unknown_project_link_type() -> None:
    with pytest.raises(ValueError):
        Analytics().track_project_click("JustCats", "docs")


def test_unknown_contact_action() -> None:
    with pytest.raises(ValueError):
        Analytics().track_contact_form("retry")
