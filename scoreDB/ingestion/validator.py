"""
Sanity checks for scraped matches.

Warnings are informational; a match with warnings is still scored.
"""
from typing import List

from ..models import CompletedMatch
from ..scrapers.match import count_games, score_tokens


def validate_completed_match(match: CompletedMatch) -> List[str]:
    """
    Check a completed match for suspicious data.

    Args:
        match: Match as produced by the extractor

    Returns:
        List of warning messages (empty when nothing looks off)
    """
    warnings = []

    if match.home_name.strip().lower() == match.away_name.strip().lower():
        warnings.append(f"Same participant on both sides: {match.home_name}")

    tokens = score_tokens(match.home_score) + score_tokens(match.away_score)
    bad = [t for t in tokens if not t.lstrip("+-")[:1].isdigit()]
    if bad:
        warnings.append(f"Non-numeric score tokens: {' '.join(bad)}")

    home_games, away_games = count_games(match.home_score, match.away_score)
    if home_games == away_games:
        warnings.append(
            f"Games level at {home_games}-{away_games} "
            f"({match.home_score} / {match.away_score}); home side {match.home_name} awarded the win"
        )

    return warnings
