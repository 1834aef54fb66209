"""
Read/write access to the player registry used by name resolution and scoring.

The pipeline reads players and writes matches and scores. It never creates
or edits Players rows; the roster is curated by hand (see init_db.seed_players).
"""
import sqlite3
from typing import Optional

from . import db_utils


class SqliteRegistry:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def find_player_by_exact_name(self, name: str) -> Optional[tuple[int, str]]:
        return db_utils.find_player_by_exact_name(self.conn, name)

    def find_player_by_name_substring(self, text: str) -> Optional[tuple[int, str]]:
        return db_utils.find_player_by_name_substring(self.conn, text)

    def list_all_player_names(self) -> list[tuple[int, str]]:
        return db_utils.list_all_player_names(self.conn)

    def upsert_match(self, tournament: str, date: str) -> tuple[int, bool]:
        return db_utils.upsert_match(self.conn, tournament, date)

    def upsert_player_score(self, match_id: int, player_id: int, increment_points: int) -> int:
        return db_utils.upsert_player_score(self.conn, match_id, player_id, increment_points)

    def commit(self) -> None:
        self.conn.commit()

    def rollback(self) -> None:
        self.conn.rollback()
