import logging
import sqlite3

from .db_utils import get_conn

logger = logging.getLogger(__name__)

# Default fantasy roster. Seeding is the only place Players rows are created.
DEFAULT_PLAYERS = [
    # Men's Singles (MS)
    ("Viktor Axelsen", 12, "MS"),
    ("Kunlavut Vitidsarn", 10, "MS"),
    ("Lee Zii Jia", 9, "MS"),
    ("Lakshya Sen", 7, "MS"),
    ("Anders Antonsen", 8, "MS"),

    # Women's Singles (WS)
    ("An Se-young", 11, "WS"),
    ("Chen Yufei", 10, "WS"),
    ("Akane Yamaguchi", 9, "WS"),
    ("P.V. Sindhu", 8, "WS"),
    ("Tai Tzu-ying", 11, "WS"),

    # Men's Doubles (MD)
    ("Fajar Alfian / Muhammad Rian", 9, "MD"),
    ("Aaron Chia / Soh Wooi Yik", 8, "MD"),
    ("Satwiksairaj Rankireddy / Chirag Shetty", 9, "MD"),

    # Women's Doubles (WD)
    ("Chen Qingchen / Jia Yifan", 10, "WD"),
    ("Nami Matsuyama / Chiharu Shida", 8, "WD"),
    ("Pearly Tan / Thinaah Muralitharan", 7, "WD"),

    # Mixed Doubles (XD)
    ("Zheng Siwei / Huang Yaqiong", 11, "XD"),
    ("Dechapol Puavaranukroh / Sapsiree Taerattanachai", 10, "XD"),
    ("Yuta Watanabe / Arisa Higashino", 9, "XD"),
]


def setup_database(conn: sqlite3.Connection | None = None, reset: bool = False) -> sqlite3.Connection:
    """
    Create the registry and ledger tables.

    Args:
        conn: Open connection; the configured database is used when omitted
        reset: Drop existing tables first

    Returns:
        The connection the schema was applied to
    """
    conn = conn or get_conn()
    cursor = conn.cursor()

    if reset:
        for table in ['Player_Scores', 'Matches', 'Players', 'Scraped_Dates']:
            cursor.execute(f'DROP TABLE IF EXISTS {table}')

    cursor.execute('''
    CREATE TABLE IF NOT EXISTS Players (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE,
        price INTEGER NOT NULL,
        category TEXT NOT NULL
    )
    ''')

    # One row per tournament per calendar day
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS Matches (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        date TEXT NOT NULL,
        UNIQUE(name, date)
    )
    ''')

    cursor.execute('''
    CREATE TABLE IF NOT EXISTS Player_Scores (
        id INTEGER PRIMARY KEY,
        match_id INTEGER NOT NULL REFERENCES Matches(id),
        player_id INTEGER NOT NULL REFERENCES Players(id),
        points INTEGER NOT NULL DEFAULT 0,
        UNIQUE(match_id, player_id)
    )
    ''')

    # Ledger of feed day labels already ingested
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS Scraped_Dates (
        date TEXT PRIMARY KEY,
        scraped_at TEXT NOT NULL
    )
    ''')

    conn.commit()
    return conn


def seed_players(conn: sqlite3.Connection, players: list[tuple] | None = None) -> int:
    """
    Replace the roster with ``players`` (name, price, category).

    Scores that reference the old roster are removed with it.

    Returns:
        Number of players inserted
    """
    players = DEFAULT_PLAYERS if players is None else players
    cursor = conn.cursor()
    cursor.execute("DELETE FROM Player_Scores")
    cursor.execute("DELETE FROM Players")
    cursor.executemany(
        "INSERT INTO Players (name, price, category) VALUES (?, ?, ?)",
        players,
    )
    conn.commit()
    logger.info("Seeded %d players", len(players))
    return len(players)


if __name__ == "__main__":
    conn = setup_database()
    conn.close()
