"""
Data carried between the scraper and the ingestion pipeline.

CompletedMatch and DayBatch are built fresh on every run and thrown away once
reconciled. Only the registry tables and the ledger outlive a run.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Set


@dataclass
class CompletedMatch:
    """A finished fixture read off the feed. ``winner_name`` is derived from the scores."""
    tournament: str
    home_name: str
    away_name: str
    home_score: str
    away_score: str
    date: str
    winner_name: str

    @property
    def loser_name(self) -> str:
        return self.away_name if self.winner_name == self.home_name else self.home_name


@dataclass
class DayBatch:
    """All completed matches found under one feed day label."""
    calendar_label: str
    scraped_at: datetime
    matches: List[CompletedMatch] = field(default_factory=list)


@dataclass
class ScrapeResult:
    """Result of one pass of the session controller."""
    total_matches: int
    day_batches: List[DayBatch]
    ingested_labels: List[str]


@dataclass
class IngestionResult:
    """Aggregate counters for one reconciliation pass."""
    matches_processed: int = 0
    points_awarded: int = 0
    new_matches_created: int = 0
    players_not_found: Set[str] = None
    errors: List[str] = None
    warnings: List[str] = None
    unresolved_opponents: Set[str] = None

    def __post_init__(self):
        if self.players_not_found is None:
            self.players_not_found = set()
        if self.errors is None:
            self.errors = []
        if self.warnings is None:
            self.warnings = []
        if self.unresolved_opponents is None:
            self.unresolved_opponents = set()


@dataclass
class PlayerReport:
    """Scraped participant names split by whether the registry knows them."""
    in_registry: List[str]
    not_in_registry: List[str]
    total_unique: int


@dataclass
class IngestionRun:
    """Everything a full run hands back to its caller."""
    result: IngestionResult
    day_batches: List[DayBatch]
    ingested_labels: List[str]
    player_report: Optional[PlayerReport] = None
