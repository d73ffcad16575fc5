"""Party repository - seeded party table with static fallback."""

from loguru import logger

from app.models.reference import Party
from app.reference import PARTIES
from app.repositories.base import BaseRepository


class PartyRepository(BaseRepository):
    """Repository for party reference data."""

    def get_parties(self) -> list[Party]:
        """Parties in display order; the static table if none are seeded.

        Read on every call so a reseed from another process is picked up.
        """
        rows = self.fetchall(
            """
            SELECT id, name, short_name, color, alliance_id, is_independent,
                   symbol, display_order, aliases
            FROM party
            ORDER BY display_order, id
            """
        )
        if not rows:
            logger.debug("Party table empty, using static parties")
            return list(PARTIES)

        result = [
            Party(
                id=r[0],
                name=r[1],
                short_name=r[2] or r[0].upper(),
                color=r[3] or "#9CA3AF",
                alliance_id=r[4],
                is_independent=bool(r[5]),
                symbol=r[6] or "",
                order=r[7] or 0,
                aliases=tuple(r[8] or ()),
            )
            for r in rows
        ]
        logger.debug("get_parties: {} parties", len(result))
        return result

    def save_parties(self, parties: list[Party]) -> int:
        """Replace the party table."""
        self._require_writable("save parties")

        self.execute("DELETE FROM party")
        for p in parties:
            self.execute(
                """
                INSERT INTO party (id, name, short_name, color, symbol, display_order,
                                   alliance_id, is_independent, aliases)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [p.id, p.name, p.short_name, p.color, p.symbol, p.order, p.alliance_id, p.is_independent, list(p.aliases) or None],
            )
        logger.info("Saved {} parties", len(parties))
        return len(parties)
