"""Results API schemas."""

from datetime import datetime

from pydantic import BaseModel


class PartyVotesItem(BaseModel):
    """Votes for one party in a constituency."""

    party_id: str
    party_name: str
    party_color: str
    votes: int
    percentage: float


class ResultResponse(BaseModel):
    """Constituency result."""

    constituency_id: str
    constituency_name: str
    status: str
    party_votes: list[PartyVotesItem]
    alliance_votes: dict[str, int]
    winner_party_id: str | None
    winner_alliance_id: str | None
    runner_up_party_id: str | None
    total_votes: int
    margin: int
    margin_percentage: float
    updated_at: datetime | None = None
    updated_by: str | None = None


class ResultsResponse(BaseModel):
    """All stored results."""

    items: list[ResultResponse]
    total: int
