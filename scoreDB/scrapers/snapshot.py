"""
Rendered-day snapshots of the results feed.

A snapshot is a frozen copy of the page for one feed day. The extractor only
talks to the DaySnapshot interface, so the CSS selectors below are the single
place that knows about the feed's markup.
"""
from dataclasses import dataclass
from typing import List, Optional, Protocol

from bs4 import BeautifulSoup, Tag

# Feed markup
FIXTURE_SELECTOR = ".event__match"
HOME_SCORE_SELECTOR = ".event__score--home"
AWAY_SCORE_SELECTOR = ".event__score--away"
STATUS_SELECTOR = ".event__stage"
HOME_PARTICIPANT_SELECTOR = ".event__participant--home"
AWAY_PARTICIPANT_SELECTOR = ".event__participant--away"
SECTION_HEADER_CLASS = "headerLeague__wrapper"
SECTION_TITLE_SELECTOR = ".headerLeague__title-text"


@dataclass
class RawFixture:
    """
    Text of one fixture row as rendered, before any filtering.

    ``tournament`` is None when no section header precedes the row.
    """
    home_score: str
    away_score: str
    status: str
    home_name: str
    away_name: str
    tournament: Optional[str]


class DaySnapshot(Protocol):
    def fixtures(self) -> List[RawFixture]:
        ...


def _text(node: Optional[Tag], selector: str) -> str:
    if node is None:
        return ""
    el = node.select_one(selector)
    return el.get_text(" ", strip=True) if el else ""


def _section_label(fixture: Tag) -> Optional[str]:
    """Walk preceding siblings back to the nearest section header and read its title."""
    for sibling in fixture.find_previous_siblings():
        if SECTION_HEADER_CLASS in (sibling.get("class") or []):
            return _text(sibling, SECTION_TITLE_SELECTOR)
    return None


class SoupDaySnapshot:
    """DaySnapshot backed by the page source parsed with BeautifulSoup."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, "html.parser")

    def fixtures(self) -> List[RawFixture]:
        rows = []
        for fixture in self.soup.select(FIXTURE_SELECTOR):
            rows.append(RawFixture(
                home_score=_text(fixture, HOME_SCORE_SELECTOR),
                away_score=_text(fixture, AWAY_SCORE_SELECTOR),
                status=_text(fixture, STATUS_SELECTOR),
                home_name=_text(fixture, HOME_PARTICIPANT_SELECTOR),
                away_name=_text(fixture, AWAY_PARTICIPANT_SELECTOR),
                tournament=_section_label(fixture),
            ))
        return rows
