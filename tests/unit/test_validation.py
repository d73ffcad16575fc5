"""Tests for stored results validation."""

import json
from datetime import datetime

from etl import reset_results, seed_parties, validate_results


def insert(conn, cid, votes, status="completed", total=None, winner=None, winner_alliance=None):
    conn.execute(
        """
        INSERT INTO result (constituency_id, party_votes, winner_party_id, winner_alliance_id,
                            total_votes, status, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        [cid, json.dumps(votes), winner, winner_alliance, total, status, datetime(2026, 2, 12, 12, 0)],
    )


class TestValidateResults:
    def test_empty(self, conn):
        report = validate_results(conn)
        assert report["valid"]
        assert report["stats"]["results"] == 0
        assert report["stats"]["votes"] == 0

    def test_submitted_results_valid(self, conn, service):
        service.submit_result({"constituency_id": "dhaka-1", "party_votes": {"bnp": 10, "al": 5}, "status": "completed"})
        service.submit_result({"constituency_id": "feni-1", "party_votes": {"jamaat": 3}, "status": "partial"})

        report = validate_results(conn)
        assert report["valid"], report["issues"]
        assert report["stats"]["completed"] == 1
        assert report["stats"]["partial"] == 1
        assert report["stats"]["votes"] == 18

    def test_total_mismatch(self, conn):
        insert(conn, "dhaka-1", {"bnp": 10}, total=12, winner="bnp", winner_alliance="bnp")
        report = validate_results(conn)
        assert not report["valid"]
        assert report["issues"] == ["dhaka-1: stored total 12 != 10"]

    def test_unknown_constituency(self, conn):
        insert(conn, "atlantis-1", {"bnp": 10}, total=10, winner="bnp", winner_alliance="bnp")
        assert validate_results(conn)["issues"] == ["atlantis-1: unknown constituency"]

    def test_stale_winner_alliance(self, conn):
        insert(conn, "dhaka-1", {"bnp": 10}, total=10, winner="bnp", winner_alliance="jamaat")
        issues = validate_results(conn)["issues"]
        assert issues == ["dhaka-1: stale winner alliance jamaat != bnp"]

    def test_legacy_status_and_keys(self, conn):
        insert(conn, "dhaka-1", {"Jamaat-e-Islami": 4}, status="counting", total=4)
        issues = validate_results(conn)["issues"]
        assert "Unexpected statuses: counting" in issues
        assert "dhaka-1: non-canonical party keys" in issues

    def test_invalid_tally(self, conn):
        insert(conn, "dhaka-1", {"bnp": -1}, total=-1)
        issues = validate_results(conn)["issues"]
        assert len(issues) == 1
        assert issues[0].startswith("dhaka-1: ")
        assert "negative" in issues[0]


class TestSeed:
    def test_seed_parties(self, conn):
        assert seed_parties(conn) > 0
        assert conn.execute("SELECT COUNT(*) FROM party WHERE id = 'other'").fetchone()[0] == 1

    def test_reset_results(self, conn, service):
        service.submit_result({"constituency_id": "dhaka-1", "party_votes": {"bnp": 1}, "status": "completed"})
        service.aggregate()
        assert reset_results(conn) == 1
        assert conn.execute("SELECT COUNT(*) FROM analytics_cache").fetchone()[0] == 0
