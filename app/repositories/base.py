"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    Pass ``conn`` to bind the repository to an explicit connection
    (maintenance scripts, tests); otherwise the thread-local one is used.
    """

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def read_only(self) -> bool:
        return self._read_only

    def _require_writable(self, action: str) -> None:
        if self._read_only:
            raise RuntimeError(f"Cannot {action} in read-only mode")

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
