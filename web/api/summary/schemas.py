"""Summary API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class SeatCountItem(BaseModel):
    """Seats and votes for a party."""

    party_id: str
    party_name: str
    party_color: str
    alliance_id: str | None
    seats: int
    leading_seats: int
    total_votes: int
    vote_percentage: float


class AllianceSeatCountItem(BaseModel):
    """Seats and votes for an alliance."""

    alliance_id: str
    alliance_name: str
    alliance_color: str
    seats: int
    leading_seats: int
    total_votes: int
    vote_percentage: float
    parties: list[SeatCountItem]


class SummaryResponse(BaseModel):
    """National election summary."""

    total_seats: int
    declared_seats: int
    required_majority: int
    party_seat_counts: list[SeatCountItem]
    total_votes_cast: int
    total_registered_voters: int
    national_turnout: float
    last_updated: datetime


class SeatCountsResponse(BaseModel):
    """Party seat counts."""

    items: list[SeatCountItem]


class AllianceSeatCountsResponse(BaseModel):
    """Alliance seat counts."""

    items: list[AllianceSeatCountItem]
    majority_alliance_id: str | None
