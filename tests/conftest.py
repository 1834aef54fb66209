# Shared fixtures: an in-memory registry and browser fakes, so no test needs
# Chrome or network access.

import sqlite3
from datetime import datetime

import pytest
from selenium.common.exceptions import NoSuchElementException

from scoreDB.init_db import seed_players, setup_database
from scoreDB.models import CompletedMatch, DayBatch
from scoreDB.scrapers.snapshot import RawFixture


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    c.execute("PRAGMA foreign_keys=ON")
    setup_database(c)
    seed_players(c)
    yield c
    c.close()


def player_id(conn, name):
    return conn.execute("SELECT id FROM Players WHERE name = ?", (name,)).fetchone()[0]


def make_match(winner, loser, tournament="World Tour Finals", date="12. Jan", home_wins=True):
    home, away = (winner, loser) if home_wins else (loser, winner)
    home_score, away_score = ("21 21", "15 17") if home_wins else ("15 17", "21 21")
    return CompletedMatch(
        tournament=tournament,
        home_name=home,
        away_name=away,
        home_score=home_score,
        away_score=away_score,
        date=date,
        winner_name=winner,
    )


def make_batch(label, matches, scraped_at=None):
    return DayBatch(calendar_label=label, scraped_at=scraped_at or datetime(2025, 1, 13, 9, 30), matches=matches)


class FakeElement:
    def __init__(self, text="", attrs=None, on_click=None, click_error=None):
        self.text = text
        self.attrs = attrs or {}
        self.on_click = on_click
        self.click_error = click_error
        self.clicks = 0

    def get_attribute(self, name):
        return self.attrs.get(name)

    def click(self):
        if self.click_error:
            raise self.click_error
        self.clicks += 1
        if self.on_click:
            self.on_click()


class FakeDriver:
    """Answers find_elements() from a selector -> elements mapping."""

    def __init__(self, elements=None, page_source="<html></html>"):
        self.elements = elements or {}
        self.page_source = page_source
        self.scripts = []
        self.visited = []
        self.quit_called = False
        self.page_load_timeout = None
        self.cdp = []
        self.find_error = None
        self.get_error = None

    def find_elements(self, by, selector):
        if self.find_error:
            raise self.find_error
        return list(self.elements.get(selector, []))

    def find_element(self, by, selector):
        found = self.find_elements(by, selector)
        if not found:
            raise NoSuchElementException(f"no such element: {selector}")
        return found[0]

    def execute_script(self, script, *args):
        self.scripts.append((script, args))

    def execute_cdp_cmd(self, cmd, params):
        self.cdp.append((cmd, params))

    def set_page_load_timeout(self, seconds):
        self.page_load_timeout = seconds

    def get(self, url):
        if self.get_error:
            raise self.get_error
        self.visited.append(url)

    def quit(self):
        self.quit_called = True


class FakeSnapshot:
    def __init__(self, fixtures):
        self._fixtures = fixtures

    def fixtures(self):
        return list(self._fixtures)


class FakeFeedSession:
    """
    Session over a scripted list of days, newest first. Index 0 is "today";
    the fake navigator moves the index forward.
    """

    def __init__(self, days, snapshot_error=None):
        self.days = days
        self.index = 0
        self.opened = False
        self.closed = False
        self.extracted = []
        self.snapshot_error = snapshot_error

    def __enter__(self):
        self.opened = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def close_popups(self):
        pass

    def current_day_label(self):
        return self.days[self.index][0]

    def snapshot(self):
        label, fixtures = self.days[self.index]
        self.extracted.append(label)
        if self.snapshot_error and label == self.snapshot_error:
            raise RuntimeError(f"page for {label} did not render")
        return FakeSnapshot(fixtures)


class FakeNavigator:
    def __init__(self, session):
        self.session = session
        self.steps = 0

    def step_backward(self):
        if self.session.index + 1 >= len(self.session.days):
            return False
        self.session.index += 1
        self.steps += 1
        return True


def fixture_row(home, away, home_score="21 21", away_score="15 17", tournament="World Tour Finals", status="Finished"):
    return RawFixture(
        home_score=home_score,
        away_score=away_score,
        status=status,
        home_name=home,
        away_name=away,
        tournament=tournament,
    )
