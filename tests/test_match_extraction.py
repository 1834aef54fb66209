from scoreDB.scrapers.match import count_games, determine_winner, extract_completed_matches, score_tokens
from scoreDB.scrapers.snapshot import SoupDaySnapshot


def _fixture(home, away, home_score, away_score, status=""):
    return f"""
    <div class="event__match">
      <div class="event__stage">{status}</div>
      <div class="event__participant--home">{home}</div>
      <div class="event__participant--away">{away}</div>
      <div class="event__score--home">{home_score}</div>
      <div class="event__score--away">{away_score}</div>
    </div>"""


def _header(title):
    return f"""
    <div class="headerLeague__wrapper">
      <span class="headerLeague__title-text">{title}</span>
    </div>"""


def _page(*parts):
    return "<html><body><div class='sportName badminton'>" + "".join(parts) + "</div></body></html>"


def test_equal_game_counts_go_to_home_side():
    # 21-15 home, 18-21 away; the third away token has no partner
    assert count_games("21 18", "15 21 19") == (1, 1)
    assert determine_winner("Home", "Away", "21 18", "15 21 19") == "Home"


def test_more_games_won_decides_winner():
    assert determine_winner("Home", "Away", "15 21 18", "21 19 21") == "Away"
    assert determine_winner("Home", "Away", "21 21", "10 12") == "Home"


def test_placeholder_and_non_numeric_tokens_are_ignored():
    assert score_tokens(" 21  -\n18 ") == ["21", "18"]
    assert count_games("21 x", "15 21") == (1, 0)
    assert count_games("21(5) 11", "19 21") == (1, 1)


def test_completed_matches_take_nearest_preceding_header():
    html = _page(
        _header("Indonesia Open"),
        _fixture("Viktor Axelsen", "Lee Zii Jia", "21 21", "15 18"),
        _header("World Tour Finals"),
        _fixture("Chen Yufei", "An Se-young", "19 21 15", "21 13 21"),
    )
    matches = extract_completed_matches(SoupDaySnapshot(html), "12. Jan")

    assert [m.tournament for m in matches] == ["Indonesia Open", "World Tour Finals"]
    assert matches[0].winner_name == "Viktor Axelsen"
    assert matches[1].winner_name == "An Se-young"
    assert all(m.date == "12. Jan" for m in matches)


def test_fixtures_without_final_score_are_dropped():
    html = _page(
        _header("Swiss Open"),
        _fixture("A", "B", "-", "21"),
        _fixture("C", "D", "21", ""),
        _fixture("E", "F", "", ""),
        _fixture("G", "H", "21 21", "10 10"),
    )
    matches = extract_completed_matches(SoupDaySnapshot(html), "12. Jan")
    assert [m.home_name for m in matches] == ["G"]


def test_unfinished_statuses_are_dropped_even_with_scores():
    html = _page(
        _header("Swiss Open"),
        _fixture("A", "B", "21 10", "15 5", status="LIVE"),
        _fixture("C", "D", "21", "15", status="Interrupted"),
        _fixture("E", "F", "21", "15", status="Postponed"),
        _fixture("G", "H", "21", "15", status="Match suspended"),
        _fixture("I", "J", "21 21", "15 15", status="Finished"),
    )
    matches = extract_completed_matches(SoupDaySnapshot(html), "12. Jan")
    assert [m.home_name for m in matches] == ["I"]


def test_fixture_without_tournament_header_is_dropped():
    html = _page(
        _fixture("A", "B", "21 21", "15 15"),
        _header("Swiss Open"),
        _fixture("C", "D", "21 21", "15 15"),
    )
    matches = extract_completed_matches(SoupDaySnapshot(html), "12. Jan")
    assert [m.home_name for m in matches] == ["C"]


def test_fixture_missing_a_participant_is_dropped():
    html = _page(
        _header("Swiss Open"),
        _fixture("", "B", "21 21", "15 15"),
        _fixture("C", "", "21 21", "15 15"),
    )
    assert extract_completed_matches(SoupDaySnapshot(html), "12. Jan") == []
