import pytest

from scoreDB.ingestion.pipeline import run_ingestion
from scoreDB.ledger import SqliteLedger

from conftest import FakeFeedSession, FakeNavigator, fixture_row

DAYS = [
    ("today", []),
    ("13. Jan", [
        fixture_row("Viktor Axelsen", "Lee Zii Jia"),
        fixture_row("V. Axelsen", "Lakshya Sen"),
    ]),
    ("12. Jan", [fixture_row("Chen Yufei", "Tai Tzu-ying", home_score="15 15", away_score="21 21")]),
]


def _run(conn, session, **kwargs):
    return run_ingestion(conn, session=session, navigator=FakeNavigator(session), day_pause=0, **kwargs)


def test_full_run_scores_winners_and_fills_ledger(conn):
    run = _run(conn, FakeFeedSession(DAYS))

    assert run.ingested_labels == ["13. Jan", "12. Jan"]
    assert run.result.matches_processed == 2
    assert run.result.points_awarded == 200
    assert run.result.players_not_found == {"V. Axelsen"}
    assert run.player_report.not_in_registry == ["V. Axelsen"]
    assert sorted(SqliteLedger(conn).list_ingested_dates()) == ["12. Jan", "13. Jan"]


def test_second_run_skips_ledger_days_and_awards_nothing(conn):
    _run(conn, FakeFeedSession(DAYS))
    session = FakeFeedSession(DAYS)
    second = _run(conn, session)

    assert session.extracted == []
    assert second.ingested_labels == []
    assert second.result.points_awarded == 0
    assert conn.execute("SELECT SUM(points) FROM Player_Scores").fetchone()[0] == 200


def test_failed_scrape_leaves_ledger_untouched(conn):
    session = FakeFeedSession(DAYS, snapshot_error="12. Jan")
    with pytest.raises(RuntimeError):
        _run(conn, session)

    assert SqliteLedger(conn).list_ingested_dates() == []
    assert conn.execute("SELECT COUNT(*) FROM Player_Scores").fetchone()[0] == 0
