"""Data validation functions."""

import json

import duckdb

from app.models.results import Result
from app.reference import ReferenceData, default_reference, is_known_constituency
from app.services.results import InvalidTallyError, normalize_result
from settings import TOTAL_SEATS


def _check_row(row: tuple, ref: ReferenceData) -> list[str]:
    cid, party_votes_json, total, winner, winner_alliance, status = row
    party_votes = json.loads(party_votes_json) if party_votes_json else {}
    problems = []

    if not is_known_constituency(cid):
        problems.append(f"{cid}: unknown constituency")

    try:
        expected: Result = normalize_result(
            {"constituency_id": cid, "party_votes": party_votes, "status": status}, ref
        )
    except InvalidTallyError as e:
        return problems + [f"{cid}: {'; '.join(e.problems)}"]

    if set(party_votes) != set(expected.party_votes):
        problems.append(f"{cid}: non-canonical party keys")
    if (total or 0) != expected.total_votes:
        problems.append(f"{cid}: stored total {total} != {expected.total_votes}")
    if winner != expected.winner_party_id:
        problems.append(f"{cid}: stored winner {winner} != {expected.winner_party_id}")
    if winner_alliance != expected.winner_alliance_id:
        problems.append(f"{cid}: stale winner alliance {winner_alliance} != {expected.winner_alliance_id}")

    return problems


def validate_results(conn: duckdb.DuckDBPyConnection, reference: ReferenceData | None = None) -> dict:
    """Validate stored results against the normalized form of their own tallies."""
    ref = reference or default_reference
    issues = []
    stats = {}

    by_status = dict(conn.execute("SELECT status, COUNT(*) FROM result GROUP BY status").fetchall())
    stats["results"] = sum(by_status.values())
    stats["completed"] = by_status.get("completed", 0)
    stats["partial"] = by_status.get("partial", 0)
    stats["pending"] = by_status.get("pending", 0)

    unexpected = sorted(set(by_status) - {"completed", "partial", "pending"})
    if unexpected:
        issues.append(f"Unexpected statuses: {', '.join(unexpected)}")

    rows = conn.execute(
        """
        SELECT constituency_id, party_votes, total_votes, winner_party_id, winner_alliance_id, status
        FROM result ORDER BY constituency_id
        """
    ).fetchall()
    for row in rows:
        issues.extend(_check_row(row, ref))

    stats["votes"] = conn.execute("SELECT COALESCE(SUM(total_votes), 0) FROM result").fetchone()[0]
    stats["coverage_pct"] = round(stats["completed"] / TOTAL_SEATS * 100, 1) if TOTAL_SEATS else 0

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
