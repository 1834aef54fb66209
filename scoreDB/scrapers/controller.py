"""
Walks the results feed backward one day at a time and collects completed matches.

Starts from yesterday (the feed opens on today) and covers a fixed window of
days. Days already in the ledger are passed over without extraction.
"""
import logging
import time
from datetime import datetime
from typing import Iterable, Optional

from .. import config
from ..models import DayBatch, ScrapeResult
from .base import FeedSession
from .match import extract_completed_matches, log_matches
from .navigator import DayNavigator

logger = logging.getLogger(__name__)


def scrape_completed_matches(
    already_ingested: Iterable[str] = (),
    session: Optional[FeedSession] = None,
    lookback_days: int = config.LOOKBACK_DAYS,
    navigator: Optional[DayNavigator] = None,
    day_pause: float = config.DAY_PAUSE_SECONDS,
) -> ScrapeResult:
    """
    Scrape completed matches for the past ``lookback_days`` days.

    Args:
        already_ingested: Ledger labels that must not be extracted again
        session: Unopened feed session; a default FeedSession when omitted
        lookback_days: Size of the day window
        navigator: Day navigator bound to ``session``
        day_pause: Pause between days

    Returns:
        ScrapeResult with one DayBatch per extracted day

    Raises:
        SessionSetupError: The feed could not be opened
        Exception: Anything raised while extracting a day; nothing is returned
    """
    session = session or FeedSession()
    navigator = navigator or DayNavigator(session)
    skip = set(already_ingested)
    if skip:
        logger.info("Skipping already ingested dates: %s", ", ".join(sorted(skip)))

    day_batches: list[DayBatch] = []
    ingested_labels: list[str] = []

    with session:
        logger.info("Navigating to yesterday")
        if not navigator.step_backward():
            logger.warning("Could not navigate to previous day; nothing scraped")
            return ScrapeResult(total_matches=0, day_batches=[], ingested_labels=[])

        for day in range(lookback_days):
            label = session.current_day_label()
            last_day = day == lookback_days - 1

            if not label:
                logger.warning("Day label unreadable after %d day(s); stopping", day)
                break
            if label in skip:
                logger.info("%s: already ingested, skipping", label)
            else:
                matches = extract_completed_matches(session.snapshot(), label)
                log_matches(label, matches)
                day_batches.append(DayBatch(calendar_label=label, scraped_at=datetime.now(), matches=matches))
                ingested_labels.append(label)
                # Guards against the feed showing the same day twice in one run
                skip.add(label)

            if last_day:
                break
            if not navigator.step_backward():
                logger.info("Reached the earliest available day after %d day(s)", day + 1)
                break
            if day_pause:
                time.sleep(day_pause)

    total = sum(len(b.matches) for b in day_batches)
    logger.info("Scraped %d completed match(es) across %d day(s): %s",
                total, len(day_batches), ", ".join(ingested_labels) or "-")
    return ScrapeResult(total_matches=total, day_batches=day_batches, ingested_labels=ingested_labels)
