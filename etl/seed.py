"""Reference data seeding and result reset."""

import duckdb
from loguru import logger

from app.models.reference import Party
from app.reference import PARTIES
from app.repositories import CacheRepository, PartyRepository, ResultRepository


def seed_parties(conn: duckdb.DuckDBPyConnection, parties: list[Party] | None = None) -> int:
    """Load the party table from the static reference table."""
    repo = PartyRepository(read_only=False, conn=conn)
    count = repo.save_parties(list(parties or PARTIES))
    CacheRepository(read_only=False, conn=conn).clear()
    logger.info("Seeded {} parties", count)
    return count


def reset_results(conn: duckdb.DuckDBPyConnection) -> int:
    """Delete every stored result and cached aggregate."""
    deleted = ResultRepository(read_only=False, conn=conn).delete_all()
    CacheRepository(read_only=False, conn=conn).clear()
    logger.warning("Reset {} results", deleted)
    return deleted
