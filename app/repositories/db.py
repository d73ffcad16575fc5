"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists() -> bool:
    """Check if database file exists."""
    return DB_PATH == ":memory:" or Path(DB_PATH).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create all tables (idempotent - DDL uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _ensure_db_exists() -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists():
        logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
        conn = duckdb.connect(DB_PATH)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if getattr(_local, "conn", None) is None:
        _ensure_db_exists()
        _local.conn = duckdb.connect(DB_PATH, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a writable connection (for maintenance tasks)."""
    conn = duckdb.connect(DB_PATH)
    init_tables(conn)
    return conn
