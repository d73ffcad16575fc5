"""Reference models - parties, alliances and geography."""

from app.models.reference.geography import District, Division
from app.models.reference.party import PARTY_DDL, Alliance, Party

__all__ = [
    "PARTY_DDL",
    "Party",
    "Alliance",
    "Division",
    "District",
]
