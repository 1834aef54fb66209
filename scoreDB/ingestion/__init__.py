"""
Ingestion pipeline for scoring scraped matches.

Provides a unified pipeline that:
1. Skips feed days already in the ledger
2. Scrapes completed matches
3. Resolves winners against the player registry
4. Awards points (never creates players)
5. Records ingested days in the ledger
"""
from .pipeline import reconcile, run_ingestion
from .report import extract_unique_player_names, generate_player_match_report
from .validator import validate_completed_match

__all__ = [
    "reconcile",
    "run_ingestion",
    "extract_unique_player_names",
    "generate_player_match_report",
    "validate_completed_match",
]
