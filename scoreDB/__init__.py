# Make scoreDB a package and expose key entrypoints
from .config import DB_PATH, WIN_POINTS
from .ingestion.pipeline import reconcile, run_ingestion
from .scrapers.controller import scrape_completed_matches
