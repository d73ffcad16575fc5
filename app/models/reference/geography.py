"""Administrative geography: divisions and districts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class District:
    """District with its number of parliamentary seats."""

    id: str
    name: str
    bn_name: str
    division_id: str
    seats: int


@dataclass(frozen=True)
class Division:
    """Top-level administrative division."""

    id: str
    name: str
    bn_name: str
    districts: tuple[District, ...] = ()
