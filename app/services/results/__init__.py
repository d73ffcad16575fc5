"""Result aggregation engine - normalizer and national aggregator."""

from app.services.results.aggregator import (
    ElectionConfig,
    aggregate,
    count_party_seats,
    group_by_alliance,
    rank_seat_counts,
)
from app.services.results.errors import InvalidTallyError
from app.services.results.normalizer import alliance_votes, normalize_result, validate_tally

__all__ = [
    # Normalizer
    "normalize_result",
    "validate_tally",
    "alliance_votes",
    "InvalidTallyError",
    # Aggregator
    "ElectionConfig",
    "aggregate",
    "count_party_seats",
    "rank_seat_counts",
    "group_by_alliance",
]
