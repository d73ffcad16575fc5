"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, BaseEntity
from app.models.reference import PARTY_DDL, Alliance, District, Division, Party
from app.models.results import (
    RESULT_DDL,
    AllianceSeatCount,
    ElectionSummary,
    Result,
    ResultStatus,
    SeatCount,
    VoteTally,
)

ALL_DDL = [
    # Reference
    PARTY_DDL,
    # Results
    RESULT_DDL,
    # Common
    CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    # Reference
    "PARTY_DDL",
    "Party",
    "Alliance",
    "Division",
    "District",
    # Results
    "RESULT_DDL",
    "Result",
    "ResultStatus",
    "VoteTally",
    "SeatCount",
    "AllianceSeatCount",
    "ElectionSummary",
    # All DDL
    "ALL_DDL",
]
