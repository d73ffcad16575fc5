"""Summary API views - thin layer over services."""

from app.container import container

from .schemas import (
    AllianceSeatCountItem,
    AllianceSeatCountsResponse,
    SeatCountItem,
    SeatCountsResponse,
    SummaryResponse,
)


def get_summary() -> SummaryResponse:
    """Get the national summary."""
    return SummaryResponse.model_validate(container.election.summary())


def get_party_seat_counts() -> SeatCountsResponse:
    """Get party seat counts ranked by seats, then votes."""
    items = [SeatCountItem.model_validate(d) for d in container.election.party_seat_counts()]
    return SeatCountsResponse(items=items)


def get_alliance_seat_counts() -> AllianceSeatCountsResponse:
    """Get alliance seat counts with member party breakdowns."""
    data = container.election.aggregate()
    majority = data["summary"]["required_majority"]

    items = [AllianceSeatCountItem.model_validate(d) for d in data["alliance_seat_counts"]]
    leader = next((a.alliance_id for a in items if a.seats >= majority), None)

    return AllianceSeatCountsResponse(items=items, majority_alliance_id=leader)
