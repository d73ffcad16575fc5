"""Result repository - stored constituency results."""

import json

from loguru import logger

from app.models.results import Result
from app.repositories.base import BaseRepository

_COLUMNS = (
    "constituency_id",
    "party_votes",
    "alliance_votes",
    "winner_party_id",
    "winner_alliance_id",
    "total_votes",
    "margin",
    "margin_percentage",
    "status",
    "updated_at",
    "updated_by",
)


def _row_to_dict(row: tuple) -> dict:
    data = dict(zip(_COLUMNS, row))
    data["party_votes"] = json.loads(data["party_votes"]) if data["party_votes"] else {}
    data["alliance_votes"] = json.loads(data["alliance_votes"]) if data["alliance_votes"] else {}
    return data


class ResultRepository(BaseRepository):
    """Repository for per-constituency results.

    Rows are returned as stored. Derived columns may be stale (older writers,
    manual edits), so callers re-normalize before using them.
    """

    def save(self, result: Result) -> None:
        """Insert or replace the row for the result's constituency."""
        self._require_writable("save results")

        self.execute(
            f"""
            INSERT OR REPLACE INTO result ({", ".join(_COLUMNS)})
            VALUES ({", ".join("?" for _ in _COLUMNS)})
            """,
            [
                result.constituency_id,
                json.dumps(result.party_votes),
                json.dumps(result.alliance_votes),
                result.winner_party_id,
                result.winner_alliance_id,
                result.total_votes,
                result.margin,
                result.margin_percentage,
                str(result.status),
                result.updated_at,
                result.updated_by,
            ],
        )
        logger.info("Saved result {} ({}, {} votes)", result.constituency_id, result.status, result.total_votes)

    def get(self, constituency_id: str) -> dict | None:
        """Stored row for one constituency."""
        row = self.fetchone(
            f"SELECT {', '.join(_COLUMNS)} FROM result WHERE constituency_id = ?",
            [constituency_id],
        )
        return _row_to_dict(row) if row else None

    def get_all(self) -> list[dict]:
        """Snapshot of all stored rows, ordered by constituency id."""
        rows = self.fetchall(f"SELECT {', '.join(_COLUMNS)} FROM result ORDER BY constituency_id")
        logger.debug("get_all: {} results", len(rows))
        return [_row_to_dict(r) for r in rows]

    def delete_all(self) -> int:
        """Remove every stored result. Returns the number deleted."""
        self._require_writable("delete results")

        count = self.fetchone("SELECT COUNT(*) FROM result")[0]
        self.execute("DELETE FROM result")
        logger.info("Deleted {} results", count)
        return count

    def snapshot_version(self) -> str:
        """Version tag of the current table contents (row count + last update)."""
        count, last = self.fetchone("SELECT COUNT(*), MAX(updated_at) FROM result")
        return f"{count}@{last.isoformat() if last else '-'}"
