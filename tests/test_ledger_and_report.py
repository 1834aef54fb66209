from scoreDB.ingestion.report import extract_unique_player_names, generate_player_match_report
from scoreDB.init_db import DEFAULT_PLAYERS, seed_players, setup_database
from scoreDB.ledger import SqliteLedger
from scoreDB.registry import SqliteRegistry

from conftest import make_batch, make_match


def test_ledger_round_trip_keeps_labels_verbatim(conn):
    ledger = SqliteLedger(conn)
    assert ledger.list_ingested_dates() == []

    ledger.record_ingested_dates(["12. Jan", "11. Jan"])
    ledger.record_ingested_dates(["12. Jan"])

    assert sorted(ledger.list_ingested_dates()) == ["11. Jan", "12. Jan"]


def test_recording_nothing_is_a_no_op(conn):
    SqliteLedger(conn).record_ingested_dates([])
    assert conn.execute("SELECT COUNT(*) FROM Scraped_Dates").fetchone()[0] == 0


def test_player_report_splits_known_and_unknown_names(conn):
    batches = [
        make_batch("12. Jan", [make_match("viktor axelsen", "V. Axelsen")]),
        make_batch("11. Jan", [make_match("Lee Zii Jia", "Viktor Axelsen")]),
    ]
    assert extract_unique_player_names(batches) == ["Lee Zii Jia", "V. Axelsen", "Viktor Axelsen", "viktor axelsen"]

    report = generate_player_match_report(batches, SqliteRegistry(conn))
    assert report.not_in_registry == ["V. Axelsen"]
    assert report.in_registry == ["Lee Zii Jia", "Viktor Axelsen", "viktor axelsen"]
    assert report.total_unique == 4


def test_setup_is_idempotent_and_seed_replaces_roster(conn):
    setup_database(conn)
    assert conn.execute("SELECT COUNT(*) FROM Players").fetchone()[0] == len(DEFAULT_PLAYERS)

    seed_players(conn, [("Kento Momota", 10, "MS")])
    assert conn.execute("SELECT name, price, category FROM Players").fetchall() == [("Kento Momota", 10, "MS")]
