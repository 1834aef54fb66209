import argparse
import logging

from . import config
from .db_utils import get_conn, list_scraped_dates
from .display import print_day_batches, print_ingestion_summary, print_player_report, print_scrape_summary
from .ingestion.pipeline import run_ingestion
from .init_db import seed_players, setup_database
from .scrapers.base import FeedSession, SessionSetupError
from .scrapers.controller import scrape_completed_matches


def _add_scrape_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--days", type=int, default=config.LOOKBACK_DAYS, help="Days to walk back from yesterday")
    p.add_argument("--show-browser", action="store_true", help="Run the browser with a visible window")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="scores", description="Badminton results ingestion")
    parser.add_argument("--db", help="Database path (default: %(default)s)", default=config.DB_PATH)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init-db", help="Create the database schema")
    p_init.add_argument("--reset", action="store_true", help="Drop existing tables first")
    p_init.add_argument("--seed", action="store_true", help="Load the default player roster")

    sub.add_parser("seed", help="Replace the player roster with the default roster")

    p_scrape = sub.add_parser("scrape", help="Scrape completed matches without writing anything")
    _add_scrape_args(p_scrape)
    p_scrape.add_argument("--ignore-ledger", action="store_true", help="Also scrape days already ingested")

    p_ingest = sub.add_parser("ingest", help="Scrape completed matches and award points")
    _add_scrape_args(p_ingest)
    p_ingest.add_argument("--ledger-per-day", action="store_true", default=config.LEDGER_COMMIT_PER_DAY,
                          help="Record each day in the ledger as soon as it is scored")

    sub.add_parser("dates", help="List feed days already ingested")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    conn = get_conn(args.db)
    try:
        setup_database(conn)

        if args.cmd == "init-db":
            setup_database(conn, reset=args.reset)
            print(f"Database ready at {args.db}")
            if args.seed:
                print(f"Seeded {seed_players(conn)} players")
            return 0

        if args.cmd == "seed":
            print(f"Seeded {seed_players(conn)} players")
            return 0

        if args.cmd == "dates":
            dates = list_scraped_dates(conn)
            if not dates:
                print("No dates ingested yet.")
            for d in dates:
                print(d)
            return 0

        session = FeedSession(headless=not args.show_browser)

        if args.cmd == "scrape":
            already = [] if args.ignore_ledger else list_scraped_dates(conn)
            try:
                scrape = scrape_completed_matches(already, session=session, lookback_days=args.days)
            except SessionSetupError as e:
                print(f"Error opening feed: {e}")
                return 1
            print_day_batches(scrape.day_batches)
            print_scrape_summary(scrape.day_batches, scrape.ingested_labels)
            return 0

        if args.cmd == "ingest":
            try:
                run = run_ingestion(conn, session=session, lookback_days=args.days,
                                    commit_per_day=args.ledger_per_day)
            except Exception as e:
                print(f"Ingestion failed: {e}")
                return 1
            print_scrape_summary(run.day_batches, run.ingested_labels)
            print_player_report(run.player_report)
            print_ingestion_summary(run.result)
            return 0
    finally:
        conn.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
