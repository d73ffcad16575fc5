"""Shared fixtures: in-memory database and wired service."""

from datetime import datetime, timezone

import duckdb
import pytest

from app.repositories import CacheRepository, PartyRepository, ResultRepository, init_tables
from app.services.election import ElectionService
from app.services.results import ElectionConfig

AS_OF = datetime(2026, 2, 12, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def config():
    return ElectionConfig(total_seats=300, required_majority=151, total_registered_voters=1_000_000)


@pytest.fixture
def result_repo(conn):
    return ResultRepository(read_only=False, conn=conn)


@pytest.fixture
def cache_repo(conn):
    return CacheRepository(read_only=False, conn=conn)


@pytest.fixture
def service(conn, config, result_repo, cache_repo):
    return ElectionService(
        result_repo=result_repo,
        party_repo=PartyRepository(read_only=False, conn=conn),
        cache_repo=cache_repo,
        config=config,
    )
