"""Election results service - write path and memoized national aggregates."""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from app.models.reference import Party
from app.models.results import Result, VoteTally
from app.reference import ReferenceData, normalize_constituency_id
from app.repositories.common import CacheRepository
from app.repositories.reference import PartyRepository
from app.repositories.results import ResultRepository
from app.services.results import (
    ElectionConfig,
    InvalidTallyError,
    aggregate,
    normalize_result,
    validate_tally,
)

AGGREGATE_KEY = "aggregate"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ElectionService:
    """Stores tallies and serves aggregates, cached per results snapshot."""

    def __init__(
        self,
        result_repo: ResultRepository,
        party_repo: PartyRepository,
        cache_repo: CacheRepository,
        config: ElectionConfig | None = None,
    ):
        self._results = result_repo
        self._parties = party_repo
        self._cache = cache_repo
        self._config = config or ElectionConfig.from_settings()
        logger.debug("ElectionService initialized")

    def _reference(self, parties: list[Party]) -> ReferenceData:
        return ReferenceData(parties=parties)

    def reference(self) -> ReferenceData:
        """Reference data built from the current party table."""
        return self._reference(self._parties.get_parties())

    def _get_cached_or_compute(self, key: str, compute_fn: Callable[[], dict]) -> dict:
        """Try DB cache for the current snapshot, compute and save if missing.

        A read-only cache repository is still consulted but never written.
        """
        version = self._results.snapshot_version()
        cached = self._cache.get(key, version)
        if cached is not None:
            return cached

        result = compute_fn()
        if self._cache.read_only:
            logger.debug("Cache read-only, not saving {}", key)
        else:
            self._cache.set(key, version, result)
        return result

    def submit_result(self, tally: VoteTally | Mapping[str, Any], updated_by: str | None = None) -> Result:
        """Validate, normalize and store a tally. Invalidates cached aggregates."""
        tally = validate_tally(tally)
        if updated_by:
            tally = tally.model_copy(update={"updated_by": updated_by})

        reference = self.reference()
        result = normalize_result(tally, reference, updated_at=_utcnow())

        self._results.save(result)
        self._cache.clear(AGGREGATE_KEY)
        logger.info(
            "Result submitted: {} status={} winner={}",
            result.constituency_id,
            result.status,
            result.winner_party_id,
        )
        return result

    def _normalize_stored(self, row: dict, reference: ReferenceData) -> Result:
        # Stored winner/alliance/margin columns are ignored and rebuilt
        return normalize_result(
            {
                "constituency_id": row["constituency_id"],
                "party_votes": row["party_votes"],
                "status": row["status"],
                "updated_by": row["updated_by"],
            },
            reference,
            updated_at=row["updated_at"],
        )

    def get_result(self, constituency_id: str) -> Result | None:
        """Canonical result for one constituency, None if nothing stored."""
        row = self._results.get(normalize_constituency_id(constituency_id))
        if row is None:
            return None
        return self._normalize_stored(row, self.reference())

    def _snapshot(self, reference: ReferenceData) -> list[Result]:
        results = []
        for row in self._results.get_all():
            try:
                results.append(self._normalize_stored(row, reference))
            except InvalidTallyError as e:
                logger.warning("Skipping stored result: {}", e)
        return results

    def get_results(self) -> list[Result]:
        """Canonical results for every stored constituency with a valid tally."""
        return self._snapshot(self.reference())

    def aggregate(self) -> dict:
        """Party seat counts, alliance seat counts and summary as a JSON-ready dict."""

        def compute() -> dict:
            parties = self._parties.get_parties()
            reference = self._reference(parties)
            results = self._snapshot(reference)

            party_counts, alliance_counts, summary = aggregate(
                results, parties, reference=reference, config=self._config
            )
            logger.info(
                "Recomputed aggregates: {}/{} declared, {} votes cast",
                summary.declared_seats,
                summary.total_seats,
                summary.total_votes_cast,
            )
            return {
                "party_seat_counts": [sc.to_dict() for sc in party_counts],
                "alliance_seat_counts": [ac.to_dict() for ac in alliance_counts],
                "summary": summary.to_dict(),
            }

        return self._get_cached_or_compute(AGGREGATE_KEY, compute)

    def summary(self) -> dict:
        """National election summary."""
        return self.aggregate()["summary"]

    def party_seat_counts(self) -> list[dict]:
        """Active parties ranked by seats, then votes."""
        return self.aggregate()["party_seat_counts"]

    def alliance_seat_counts(self) -> list[dict]:
        """Alliance roll-ups with member breakdowns."""
        return self.aggregate()["alliance_seat_counts"]

    def reset_results(self) -> int:
        """Delete all stored results and cached aggregates."""
        deleted = self._results.delete_all()
        self._cache.clear()
        logger.warning("All results reset ({} removed)", deleted)
        return deleted
