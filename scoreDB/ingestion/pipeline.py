"""
Main ingestion pipeline.

Orchestrates the complete ingestion process:
1. Reads the ledger of already ingested feed days
2. Scrapes the remaining days of the lookback window
3. Resolves winners against the player registry
4. Upserts match and score rows, awarding WIN_POINTS per win
5. Records the extracted days in the ledger
"""
import logging
import sqlite3
from typing import List, Optional

from .. import config
from ..db_utils import get_conn
from ..ledger import SqliteLedger
from ..models import DayBatch, IngestionResult, IngestionRun
from ..normalizers.player import PlayerNameResolver
from ..registry import SqliteRegistry
from ..scrapers.base import FeedSession
from ..scrapers.controller import scrape_completed_matches
from .report import generate_player_match_report
from .validator import validate_completed_match

logger = logging.getLogger(__name__)


def reconcile(
    day_batches: List[DayBatch],
    registry,
    ledger=None,
    win_points: int = config.WIN_POINTS,
    commit_per_day: bool = config.LEDGER_COMMIT_PER_DAY,
) -> IngestionResult:
    """
    Award points for every scraped match whose winner is a registered player.

    Matches are keyed by (tournament, scrape calendar day); a win adds
    ``win_points`` to the winner's score for that match row. Reconciling the
    same batch twice therefore awards the points twice. Only the ledger
    prevents a day from being reconciled again on a later run.

    Args:
        day_batches: Batches in the order they were scraped
        registry: Registry read/write interface
        ledger: Ledger to record the batch labels in; skipped when None
        win_points: Points per win
        commit_per_day: Record each label as soon as its day is reconciled
                        instead of once after all batches

    Returns:
        IngestionResult with counters, unresolved names and per-match errors
    """
    result = IngestionResult()
    resolver = PlayerNameResolver(registry)

    for batch in day_batches:
        match_date = batch.scraped_at.date().isoformat()
        logger.info("Processing %d match(es) for %s", len(batch.matches), batch.calendar_label)

        for match in batch.matches:
            try:
                winner_id = resolver.resolve(match.winner_name)
                if winner_id is None:
                    logger.warning("Winner not found in registry: %s", match.winner_name)
                    result.players_not_found.add(match.winner_name)
                    continue

                # Reporting only; an unknown opponent does not block the win
                if resolver.resolve(match.loser_name) is None:
                    result.unresolved_opponents.add(match.loser_name)

                warnings = validate_completed_match(match)
                match_id, created = registry.upsert_match(match.tournament, match_date)
                registry.upsert_player_score(match_id, winner_id, win_points)
                registry.commit()
            except Exception as e:
                registry.rollback()
                msg = f"Error processing match {match.tournament}: {e}"
                result.errors.append(msg)
                logger.error(msg)
                continue

            # Counted only once the writes are committed
            if created:
                result.new_matches_created += 1
            for warning in warnings:
                result.warnings.append(f"{batch.calendar_label} {match.tournament}: {warning}")
            result.matches_processed += 1
            result.points_awarded += win_points
            logger.info("Awarded %d points to %s for beating %s",
                        win_points, match.winner_name, match.loser_name)

        if ledger is not None and commit_per_day:
            ledger.record_ingested_dates([batch.calendar_label])

    if ledger is not None and not commit_per_day:
        ledger.record_ingested_dates([b.calendar_label for b in day_batches])

    return result


def run_ingestion(
    conn: Optional[sqlite3.Connection] = None,
    session: Optional[FeedSession] = None,
    lookback_days: int = config.LOOKBACK_DAYS,
    commit_per_day: bool = config.LEDGER_COMMIT_PER_DAY,
    **scrape_options,
) -> IngestionRun:
    """
    Scrape the feed and score the results. The single entry point for a full run.

    Args:
        conn: Database connection; the configured database when omitted
        session: Unopened feed session; a default FeedSession when omitted
        lookback_days: Days to walk back from yesterday
        commit_per_day: See reconcile()
        scrape_options: Passed through to scrape_completed_matches (navigator, day_pause)

    Returns:
        IngestionRun with the reconciliation result, the raw day batches,
        the extracted labels and the player match report

    Raises:
        SessionSetupError: The feed could not be opened; the ledger is untouched
    """
    own_conn = conn is None
    conn = conn or get_conn()
    try:
        registry = SqliteRegistry(conn)
        ledger = SqliteLedger(conn)

        already = ledger.list_ingested_dates()
        scrape = scrape_completed_matches(
            already, session=session, lookback_days=lookback_days, **scrape_options
        )

        report = generate_player_match_report(scrape.day_batches, registry)
        if report.not_in_registry:
            logger.info("%d scraped participant(s) not in registry", len(report.not_in_registry))

        result = reconcile(scrape.day_batches, registry, ledger, commit_per_day=commit_per_day)
        logger.info(
            "Ingestion finished: %d processed, %d points, %d new match(es), %d unresolved, %d error(s)",
            result.matches_processed, result.points_awarded, result.new_matches_created,
            len(result.players_not_found), len(result.errors),
        )
        return IngestionRun(
            result=result,
            day_batches=scrape.day_batches,
            ingested_labels=scrape.ingested_labels,
            player_report=report,
        )
    finally:
        if own_conn:
            conn.close()
