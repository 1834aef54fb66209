from typing import List

from .models import DayBatch, IngestionResult, PlayerReport


def print_day_batches(day_batches: List[DayBatch]) -> None:
    """Print every scraped match grouped by feed day."""
    for batch in day_batches:
        print(f"\nDate: {batch.calendar_label}")
        print("-" * 50)
        if not batch.matches:
            print("No completed matches found for this date")
            continue
        print(f"Found {len(batch.matches)} completed matches:")
        for i, m in enumerate(batch.matches, 1):
            print(f"{i:2d}. Tournament: {m.tournament}")
            print(f"    {m.home_name} {m.home_score} - {m.away_score} {m.away_name}")
            print(f"    Winner: {m.winner_name}")


def print_scrape_summary(day_batches: List[DayBatch], labels: List[str]) -> None:
    total = sum(len(b.matches) for b in day_batches)
    print("\n" + "=" * 50)
    print("SCRAPING SUMMARY")
    print("=" * 50)
    for batch in day_batches:
        print(f"{batch.calendar_label}: {len(batch.matches)} matches")
    print(f"\nTotal completed matches scraped: {total}")
    print(f"Dates scraped: {', '.join(labels) if labels else 'none'}")


def print_player_report(report: PlayerReport) -> None:
    print("\nPlayer Match Report:")
    print(f"Total unique players in scrape: {report.total_unique}")
    print(f"Players in registry: {len(report.in_registry)}")
    print(f"Players NOT in registry: {len(report.not_in_registry)}")
    if report.not_in_registry:
        print("\nPlayers not found in registry:")
        for name in report.not_in_registry:
            print(f"  - {name}")
        print("\nConsider adding these players to the roster before the next run.")


def print_ingestion_summary(result: IngestionResult) -> None:
    print("\n" + "=" * 50)
    print("INGESTION SUMMARY")
    print("=" * 50)
    print(f"Matches processed: {result.matches_processed}")
    print(f"New match records created: {result.new_matches_created}")
    print(f"Points awarded: {result.points_awarded}")
    print(f"Winners not in registry: {len(result.players_not_found)}")
    print(f"Errors: {len(result.errors)}")

    if result.players_not_found:
        print("\nUnresolved winners (matches skipped):")
        for name in sorted(result.players_not_found):
            print(f"  - {name}")
    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")
    if result.errors:
        print("\nErrors encountered:")
        for err in result.errors:
            print(f"  - {err}")
