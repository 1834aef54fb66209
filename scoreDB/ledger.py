"""
Ledger of feed day labels that have been fully ingested.

Labels are stored exactly as the feed renders them (e.g. "12. Jan"); they are
never parsed or normalized.
"""
import logging
import sqlite3

from .db_utils import list_scraped_dates, upsert_scraped_dates

logger = logging.getLogger(__name__)


class SqliteLedger:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list_ingested_dates(self) -> list[str]:
        return list_scraped_dates(self.conn)

    def record_ingested_dates(self, labels: list[str]) -> None:
        if not labels:
            return
        upsert_scraped_dates(self.conn, labels)
        self.conn.commit()
        logger.info("Recorded %d ingested date(s): %s", len(labels), ", ".join(labels))
