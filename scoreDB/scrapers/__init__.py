"""
Scraper modules for reading completed matches off the results feed.

- base: Browser session lifecycle (open, configure, close)
- navigator: Previous-day navigation
- snapshot: Rendered-day snapshots and the feed's selectors
- match: Completed-match filtering and winner derivation
- controller: The day-by-day scrape loop
"""
from .base import FeedSession, SessionSetupError
from .controller import scrape_completed_matches
from .match import determine_winner, extract_completed_matches
from .navigator import DayNavigator
from .snapshot import DaySnapshot, RawFixture, SoupDaySnapshot

__all__ = [
    "FeedSession",
    "SessionSetupError",
    "scrape_completed_matches",
    "determine_winner",
    "extract_completed_matches",
    "DayNavigator",
    "DaySnapshot",
    "RawFixture",
    "SoupDaySnapshot",
]
