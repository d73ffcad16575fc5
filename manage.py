#!/usr/bin/env python3
"""
Maintenance tasks for the results database.

Usage:
    python manage.py seed         # Load parties into the party table
    python manage.py reset        # Delete all results (asks for --yes)
    python manage.py validate     # Check stored results integrity
    python manage.py recompute    # Rebuild cached aggregates
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb  # noqa: E402

from app.repositories import CacheRepository, PartyRepository, ResultRepository, get_write_connection  # noqa: E402
from app.services.election import ElectionService  # noqa: E402
from etl import reset_results, seed_parties, validate_results  # noqa: E402
from settings import DB_PATH  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(level="INFO", to_file=True)


def run_validation() -> bool:
    """Validate stored results and print a report."""
    conn = duckdb.connect(DB_PATH, read_only=True)
    result = validate_results(conn)
    conn.close()

    stats = result["stats"]
    print("\n" + "=" * 60)
    print("RESULTS VALIDATION REPORT")
    print("=" * 60)
    print(f"  Results:   {stats['results']:,}")
    print(f"  Completed: {stats['completed']:,}")
    print(f"  Partial:   {stats['partial']:,}")
    print(f"  Pending:   {stats['pending']:,}")
    print(f"  Votes:     {stats['votes']:,}")
    print(f"  Declared:  {stats['coverage_pct']}%")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All results valid!")
    else:
        print("❌ Some issues found. Re-submit the listed constituencies to fix.")
    print("=" * 60 + "\n")
    return result["valid"]


def recompute() -> None:
    """Drop cached aggregates and compute them again."""
    conn = get_write_connection()
    cache_repo = CacheRepository(read_only=False, conn=conn)
    service = ElectionService(
        result_repo=ResultRepository(read_only=False, conn=conn),
        party_repo=PartyRepository(read_only=False, conn=conn),
        cache_repo=cache_repo,
    )
    cache_repo.clear()
    summary = service.summary()
    logger.info(
        "Aggregates cached: {}/{} declared, turnout {:.2f}%",
        summary["declared_seats"],
        summary["total_seats"],
        summary["national_turnout"],
    )
    conn.close()


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    command = args[0]

    if command == "validate":
        sys.exit(0 if run_validation() else 1)

    if command == "recompute":
        recompute()
        return

    conn = get_write_connection()
    try:
        if command == "seed":
            seed_parties(conn)
        elif command == "reset":
            if "--yes" not in args:
                print("Refusing to delete results without --yes")
                sys.exit(1)
            reset_results(conn)
        else:
            print(__doc__)
            sys.exit(1)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
