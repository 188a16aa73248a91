from __future__ import annotations

import dataclasses

import pytest

from portfolio_site.config import ASSETS
from portfolio_site.content import (
    PROFILE, PROJECT_TABS, PROJECTS, SECTIONS, SKILLS, Project, ProjectStatus, Skill,
    filter_projects, get_project, has_category,
)


def _ids(projects) -> list:
    return [p.id for p in projects]


def test_all_returns_every_project_in_order() -> None:
    result = filter_projects(PROJECTS, "all")
    assert result == list(PROJECTS)


def test_nft_matches_single_and_list_categories() -> None:
    result = filter_projects(PROJECTS, "nft")
    assert _ids(result) == [1, 2]
    for p in result:
        assert p.category == "nft" or "nft" in p.category


@pytest.mark.parametrize("category, expected", [
    ("defi", [4]),
    ("Crowd Funding", [3]),
    ("Dating", [2]),
    ("Crowd", []),
    ("gaming", []),
])
def test_every_tab(category: str, expected: list) -> None:
    assert _ids(filter_projects(PROJECTS, category)) == expected


def test_single_category_uses_equality() -> None:
    p = dataclasses.replace(PROJECTS[0], category="nft-tools")
    assert not has_category(p, "nft")
    p = dataclasses.replace(PROJECTS[0], category=("nft-tools", "defi"))
    assert has_category(p, "defi")
    assert not has_category(p, "nft")


def test_filter_does_not_touch_source() -> None:
    before = tuple(PROJECTS)
    filter_projects(PROJECTS, "nft")
    assert PROJECTS == before
    with pytest.raises(dataclasses.FrozenInstanceError):
        PROJECTS[0].title = "changed"


def test_tabs_cover_every_project() -> None:
    values = [value for value, _ in PROJECT_TABS]
    assert values[0] == "all"
    covered = {p.id for value in values[1:] for p in filter_projects(PROJECTS, value)}
    assert covered == {p.id for p in PROJECTS}


def test_statuses_and_skills() -> None:
    assert {p.status for p in PROJECTS} <= set(ProjectStatus)
    assert ProjectStatus("In Development") is ProjectStatus.IN_DEVELOPMENT
    assert all(0 <= s.level <= 100 for s in SKILLS)
    with pytest.raises(ValueError):
        Skill("Overclocked", 120, "cpu")


def test_get_project() -> None:
    assert get_project(3).title == "Just Cats Crowdfunding"
    assert get_project(99) is None


def test_sections_in_page_order() -> None:
    assert SECTIONS == ("home", "about", "projects", "skills", "resume", "contact")
    assert isinstance(PROJECTS[1], Project)


def test_resume_asset_ships_as_a_pdf() -> None:
    path = ASSETS / PROFILE["resume"]
    assert path.is_file()
    assert path.read_bytes().startswith(b"%PDF-")
