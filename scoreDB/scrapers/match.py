"""
Completed-match extraction from a rendered feed day.

Turns the raw fixture rows of a DaySnapshot into CompletedMatch records:
- Drops fixtures without a final score on both sides
- Drops live / interrupted / postponed / suspended fixtures
- Drops fixtures without a tournament header or without both participants
- Derives the winner from the per-game scores
"""
import logging
import re
from typing import List, Optional, Tuple

from ..models import CompletedMatch
from .snapshot import DaySnapshot, RawFixture

logger = logging.getLogger(__name__)

PLACEHOLDER_SCORE = "-"
EXCLUDED_STATUSES = ("live", "interrupted", "postponed", "suspended")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def score_tokens(score_text: str) -> List[str]:
    """Split score text on whitespace, dropping empty and placeholder tokens."""
    return [t for t in re.split(r"\s+", score_text or "") if t and t != PLACEHOLDER_SCORE]


def _to_int(token: str) -> Optional[int]:
    # Leading digits are enough ("21(5)" -> 21)
    m = _LEADING_INT.match(token)
    return int(m.group(1)) if m else None


def count_games(home_score: str, away_score: str) -> Tuple[int, int]:
    """
    Count games won by each side.

    Tokens are paired by position up to the shorter side. A position where
    either token is not a number, or where both are equal, counts for nobody.

    Returns:
        Tuple of (home_games, away_games)
    """
    home_parts = score_tokens(home_score)
    away_parts = score_tokens(away_score)

    home_games = away_games = 0
    for home_token, away_token in zip(home_parts, away_parts):
        home_points = _to_int(home_token)
        away_points = _to_int(away_token)
        if home_points is None or away_points is None:
            continue
        if home_points > away_points:
            home_games += 1
        elif away_points > home_points:
            away_games += 1
    return home_games, away_games


def determine_winner(home_name: str, away_name: str, home_score: str, away_score: str) -> str:
    """The side with more games won; the home side when the count is level."""
    home_games, away_games = count_games(home_score, away_score)
    return away_name if away_games > home_games else home_name


def _is_missing_score(score: str) -> bool:
    return not score or score == PLACEHOLDER_SCORE


def exclusion_reason(fixture: RawFixture) -> Optional[str]:
    """Why a fixture is not a completed match, or None when it is."""
    if _is_missing_score(fixture.home_score) or _is_missing_score(fixture.away_score):
        return "no final score"
    status = (fixture.status or "").lower()
    for marker in EXCLUDED_STATUSES:
        if marker in status:
            return f"status '{fixture.status}'"
    if not fixture.tournament:
        return "no tournament header"
    if not fixture.home_name or not fixture.away_name:
        return "missing participant"
    return None


def extract_completed_matches(snapshot: DaySnapshot, day_label: str) -> List[CompletedMatch]:
    """
    Extract completed matches for the feed day currently rendered.

    Args:
        snapshot: Rendered day to read fixtures from
        day_label: Feed's own label for the day, copied onto every match

    Returns:
        Completed matches in page order
    """
    matches = []
    for fixture in snapshot.fixtures():
        reason = exclusion_reason(fixture)
        if reason:
            logger.debug("Skipping %s vs %s: %s", fixture.home_name or "?", fixture.away_name or "?", reason)
            continue
        matches.append(CompletedMatch(
            tournament=fixture.tournament,
            home_name=fixture.home_name,
            away_name=fixture.away_name,
            home_score=fixture.home_score,
            away_score=fixture.away_score,
            date=day_label,
            winner_name=determine_winner(
                fixture.home_name, fixture.away_name, fixture.home_score, fixture.away_score
            ),
        ))
    return matches


def log_matches(day_label: str, matches: List[CompletedMatch]) -> None:
    if not matches:
        logger.info("%s: no completed matches", day_label)
        return
    logger.info("%s: %d completed match(es)", day_label, len(matches))
    for m in matches:
        logger.debug("  [%s] %s %s - %s %s, winner: %s",
                     m.tournament, m.home_name, m.home_score, m.away_score, m.away_name, m.winner_name)
