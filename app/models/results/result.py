"""Constituency result model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity

RESULT_DDL = """
CREATE TABLE IF NOT EXISTS result (
    constituency_id VARCHAR PRIMARY KEY,
    party_votes JSON NOT NULL,
    alliance_votes JSON,
    winner_party_id VARCHAR,
    winner_alliance_id VARCHAR,
    total_votes BIGINT DEFAULT 0,
    margin BIGINT DEFAULT 0,
    margin_percentage DOUBLE DEFAULT 0,
    status VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    updated_by VARCHAR
)
"""


class ResultStatus(StrEnum):
    """Counting progress of one constituency."""

    PENDING = "pending"
    PARTIAL = "partial"
    COMPLETED = "completed"


@dataclass
class Result(BaseEntity):
    """Canonical per-constituency result."""

    constituency_id: str
    party_votes: dict[str, int] = field(default_factory=dict)
    alliance_votes: dict[str, int] = field(default_factory=dict)
    winner_party_id: str | None = None
    winner_alliance_id: str | None = None
    runner_up_party_id: str | None = None
    total_votes: int = 0
    margin: int = 0
    margin_percentage: float = 0.0
    status: ResultStatus = ResultStatus.PENDING
    updated_at: datetime | None = None
    updated_by: str | None = None

    @property
    def is_declared(self) -> bool:
        return self.status == ResultStatus.COMPLETED
