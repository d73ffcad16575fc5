"""Cache repository - memoized aggregation output."""

import json
from datetime import datetime, timezone

from loguru import logger

from app.repositories.base import BaseRepository


class CacheRepository(BaseRepository):
    """Repository for analytics cache operations.

    Entries are stored with the snapshot version they were computed from;
    a lookup with any other version is a miss.
    """

    def get(self, key: str, version: str) -> dict | None:
        """Load cached payload if it was computed from ``version``."""
        row = self.fetchone(
            "SELECT data FROM analytics_cache WHERE key = ? AND version = ?",
            [key, version],
        )
        if row:
            logger.debug("Cache hit: key={}, version={}", key, version)
            return json.loads(row[0])
        return None

    def set(self, key: str, version: str, data: dict) -> None:
        """Save payload, replacing any older version."""
        self._require_writable("write cache")

        self.execute(
            """
            INSERT OR REPLACE INTO analytics_cache (key, version, data, computed_at)
            VALUES (?, ?, ?, ?)
            """,
            [key, version, json.dumps(data), datetime.now(timezone.utc).replace(tzinfo=None)],
        )
        logger.debug("Cache saved: key={}, version={}", key, version)

    def clear(self, key: str | None = None) -> None:
        """Clear one key or everything."""
        self._require_writable("clear cache")

        if key:
            self.execute("DELETE FROM analytics_cache WHERE key = ?", [key])
            logger.info("Cache cleared for {}", key)
        else:
            self.execute("DELETE FROM analytics_cache")
            logger.info("All cache cleared")

    def exists(self, key: str) -> bool:
        """Check if any version of key is cached."""
        row = self.fetchone("SELECT COUNT(*) FROM analytics_cache WHERE key = ?", [key])
        return row[0] > 0
