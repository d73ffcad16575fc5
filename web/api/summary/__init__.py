"""Summary API."""

from web.api.summary.views import get_alliance_seat_counts, get_party_seat_counts, get_summary

__all__ = [
    "get_summary",
    "get_party_seat_counts",
    "get_alliance_seat_counts",
]
