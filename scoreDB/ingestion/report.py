from typing import List

from ..models import DayBatch, PlayerReport


def extract_unique_player_names(day_batches: List[DayBatch]) -> List[str]:
    """Every participant name seen in the batches, sorted."""
    names = set()
    for batch in day_batches:
        for match in batch.matches:
            names.add(match.home_name)
            names.add(match.away_name)
    return sorted(names)


def generate_player_match_report(day_batches: List[DayBatch], registry) -> PlayerReport:
    """
    Split scraped participants into those the registry knows by exact
    (case-insensitive) name and those it does not.

    Use the second list to curate the roster before the next run.
    """
    scraped = extract_unique_player_names(day_batches)
    known = {name.lower() for _, name in registry.list_all_player_names()}

    in_registry = [n for n in scraped if n.lower() in known]
    not_in_registry = [n for n in scraped if n.lower() not in known]
    return PlayerReport(
        in_registry=in_registry,
        not_in_registry=not_in_registry,
        total_unique=len(scraped),
    )
