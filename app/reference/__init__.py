"""Reference data - static parties, alliances and geography."""

from app.reference.geography import (
    DISTRICTS,
    DIVISIONS,
    all_constituency_ids,
    constituency_id,
    constituency_name,
    get_district,
    is_known_constituency,
    normalize_constituency_id,
    parse_constituency_id,
)
from app.reference.parties import (
    ALLIANCES,
    INDEPENDENT_PARTY_ID,
    OTHER_PARTY_ID,
    OTHERS_ALLIANCE_ID,
    PARTIES,
)
from app.reference.provider import ReferenceData, default_reference

__all__ = [
    # Parties
    "PARTIES",
    "ALLIANCES",
    "OTHER_PARTY_ID",
    "INDEPENDENT_PARTY_ID",
    "OTHERS_ALLIANCE_ID",
    "ReferenceData",
    "default_reference",
    # Geography
    "DIVISIONS",
    "DISTRICTS",
    "normalize_constituency_id",
    "parse_constituency_id",
    "constituency_id",
    "constituency_name",
    "get_district",
    "is_known_constituency",
    "all_constituency_ids",
]
