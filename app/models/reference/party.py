"""Party and alliance reference entities."""

from dataclasses import dataclass

PARTY_DDL = """
CREATE TABLE IF NOT EXISTS party (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    short_name VARCHAR,
    color VARCHAR,
    symbol VARCHAR,
    display_order INTEGER,
    alliance_id VARCHAR,
    is_independent BOOLEAN DEFAULT FALSE,
    aliases VARCHAR[]
)
"""


@dataclass(frozen=True)
class Party:
    """Political party (or the independent / other buckets)."""

    id: str
    name: str
    short_name: str
    color: str
    alliance_id: str | None = None
    is_independent: bool = False
    symbol: str = ""
    order: int = 0
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class Alliance:
    """Named grouping of parties for roll-up reporting."""

    id: str
    name: str
    short_name: str
    color: str
