"""Results domain models - tallies, results and aggregates."""

from app.models.results.entities import AllianceSeatCount, ElectionSummary, SeatCount
from app.models.results.result import RESULT_DDL, Result, ResultStatus
from app.models.results.tally import VoteTally

__all__ = [
    "RESULT_DDL",
    "Result",
    "ResultStatus",
    "VoteTally",
    "SeatCount",
    "AllianceSeatCount",
    "ElectionSummary",
]
