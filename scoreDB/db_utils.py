import sqlite3
from datetime import datetime
from typing import Optional
from .config import DB_PATH


def get_conn(db_path: str | None = None) -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Optional path to database file. If None, uses default from config.

    Returns:
        SQLite connection object
    """
    conn = sqlite3.connect(db_path or DB_PATH)
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def find_player_by_exact_name(conn: sqlite3.Connection, name: str) -> Optional[tuple[int, str]]:
    """Case-insensitive equality on Players.name. Returns (id, name) or None."""
    cur = conn.execute(
        "SELECT id, name FROM Players WHERE lower(name) = lower(?) ORDER BY id LIMIT 1",
        (name,),
    )
    return cur.fetchone()


def find_player_by_name_substring(conn: sqlite3.Connection, text: str) -> Optional[tuple[int, str]]:
    """
    Find a player whose registry name contains ``text``.

    Matching is case-insensitive; instr() is used instead of LIKE so that
    '%' and '_' in names are not treated as wildcards.
    """
    cur = conn.execute(
        """
        SELECT id, name FROM Players
        WHERE instr(lower(name), lower(?)) > 0
        ORDER BY id
        LIMIT 1
        """,
        (text,),
    )
    return cur.fetchone()


def list_all_player_names(conn: sqlite3.Connection) -> list[tuple[int, str]]:
    """All (id, name) pairs in insertion order."""
    return conn.execute("SELECT id, name FROM Players ORDER BY id").fetchall()


def upsert_match(conn: sqlite3.Connection, name: str, date: str) -> tuple[int, bool]:
    """
    Insert a match keyed by (name, date) if it does not exist yet.

    Existing rows are left untouched.

    Args:
        conn: Database connection
        name: Tournament name
        date: ISO calendar date (YYYY-MM-DD)

    Returns:
        Tuple of (match id, created flag)
    """
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO Matches (name, date) VALUES (?, ?)
        ON CONFLICT(name, date) DO NOTHING
        """,
        (name, date),
    )
    created = cur.rowcount == 1
    cur.execute("SELECT id FROM Matches WHERE name = ? AND date = ?", (name, date))
    row = cur.fetchone()
    return int(row[0]), created


def upsert_player_score(conn: sqlite3.Connection, match_id: int, player_id: int, points: int) -> int:
    """
    Add ``points`` to the (match_id, player_id) score, creating it when absent.

    Repeat calls for the same key increment; they never overwrite.

    Returns:
        Points stored after the write
    """
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO Player_Scores (match_id, player_id, points)
        VALUES (?, ?, ?)
        ON CONFLICT(match_id, player_id) DO UPDATE SET
            points = Player_Scores.points + excluded.points
        """,
        (match_id, player_id, points),
    )
    cur.execute(
        "SELECT points FROM Player_Scores WHERE match_id = ? AND player_id = ?",
        (match_id, player_id),
    )
    return int(cur.fetchone()[0])


def list_scraped_dates(conn: sqlite3.Connection) -> list[str]:
    """Ledger labels, most recently ingested first."""
    rows = conn.execute(
        "SELECT date FROM Scraped_Dates ORDER BY scraped_at DESC, date DESC"
    ).fetchall()
    return [r[0] for r in rows]


def upsert_scraped_dates(conn: sqlite3.Connection, labels: list[str], scraped_at: datetime | None = None) -> None:
    """Record ledger labels; an existing label only gets its timestamp refreshed."""
    ts = (scraped_at or datetime.now()).isoformat(timespec='seconds')
    conn.executemany(
        """
        INSERT INTO Scraped_Dates (date, scraped_at) VALUES (?, ?)
        ON CONFLICT(date) DO UPDATE SET scraped_at = excluded.scraped_at
        """,
        [(label, ts) for label in labels],
    )
