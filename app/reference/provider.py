"""Reference data provider - party/alliance lookups and key normalization."""

import re
from collections.abc import Iterable

from loguru import logger

from app.models.reference import Alliance, Party
from app.reference.parties import ALLIANCES, OTHER_PARTY_ID, OTHERS_ALLIANCE_ID, PARTIES


def _fold(text: str) -> str:
    return re.sub(r"\s+", " ", text.strip()).casefold()


class ReferenceData:
    """Immutable party and alliance tables.

    Lookups return None for unknown ids. Anything that has to land in a
    bucket (party keys, alliance membership) falls back to "other" /
    "others" instead of failing.
    """

    def __init__(
        self,
        parties: Iterable[Party] = PARTIES,
        alliances: Iterable[Alliance] = ALLIANCES,
    ):
        self.parties: tuple[Party, ...] = tuple(sorted(parties, key=lambda p: (p.order, p.id)))
        self.alliances: tuple[Alliance, ...] = tuple(alliances)
        self._parties = {p.id: p for p in self.parties}
        self._alliances = {a.id: a for a in self.alliances}

        self._keys: dict[str, str] = {}
        for party in self.parties:
            for key in (party.id, party.name, party.short_name, *party.aliases):
                # First party to claim a spelling keeps it
                self._keys.setdefault(_fold(key), party.id)

    def get_party(self, party_id: str | None) -> Party | None:
        """Party by id, None if unknown."""
        if party_id is None:
            return None
        return self._parties.get(party_id)

    def get_alliance(self, alliance_id: str | None) -> Alliance | None:
        """Alliance by id, None if unknown."""
        if alliance_id is None:
            return None
        return self._alliances.get(alliance_id)

    @property
    def others(self) -> Alliance:
        """Catch-all alliance."""
        return self._alliances.get(OTHERS_ALLIANCE_ID) or Alliance(
            id=OTHERS_ALLIANCE_ID, name="Others", short_name="OTH", color="#9CA3AF"
        )

    @property
    def other_party(self) -> Party:
        """Fallback party bucket for unrecognized keys."""
        return self._parties.get(OTHER_PARTY_ID) or Party(
            id=OTHER_PARTY_ID, name="Others", short_name="OTH", color="#9CA3AF", order=100
        )

    def alliance_id_for(self, party_id: str | None) -> str:
        """Alliance bucket of a party; unknown parties and independents go to "others"."""
        party = self.get_party(party_id)
        if party is None or party.is_independent:
            return OTHERS_ALLIANCE_ID
        return self.alliance_id_of(party)

    def alliance_id_of(self, party: Party) -> str:
        """Alliance bucket of a party record that may not be in this table."""
        if party.is_independent or party.alliance_id not in self._alliances:
            return OTHERS_ALLIANCE_ID
        return party.alliance_id

    def normalize_party_key(self, raw: str | None) -> str:
        """Map a party id or free-text name to a canonical party id.

        Matches ids, display names, short names and aliases, ignoring case
        and surrounding whitespace. Unmatched keys map to "other".
        """
        if not raw:
            return OTHER_PARTY_ID

        party_id = self._keys.get(_fold(raw))
        if party_id is None:
            logger.warning("Unknown party key {!r}, counted as {}", raw, OTHER_PARTY_ID)
            return OTHER_PARTY_ID
        return party_id


default_reference = ReferenceData()
