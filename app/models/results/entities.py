"""Aggregated results - national seat counts and summary."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity


@dataclass
class SeatCount(BaseEntity):
    """Seats, leads and votes for one party."""

    party_id: str
    party_name: str
    party_color: str
    alliance_id: str | None = None
    seats: int = 0
    leading_seats: int = 0
    total_votes: int = 0
    vote_percentage: float = 0.0

    @property
    def is_active(self) -> bool:
        return bool(self.seats or self.leading_seats or self.total_votes)


@dataclass
class AllianceSeatCount(BaseEntity):
    """Alliance totals with member party breakdown."""

    alliance_id: str
    alliance_name: str
    alliance_color: str
    seats: int = 0
    leading_seats: int = 0
    total_votes: int = 0
    vote_percentage: float = 0.0
    parties: list[SeatCount] = field(default_factory=list)


@dataclass
class ElectionSummary(BaseEntity):
    """National summary."""

    total_seats: int
    declared_seats: int
    required_majority: int
    party_seat_counts: list[SeatCount]
    total_votes_cast: int
    total_registered_voters: int
    national_turnout: float
    last_updated: datetime
