"""Analytics cache table - memoized aggregation output."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS analytics_cache (
    key VARCHAR PRIMARY KEY,
    version VARCHAR NOT NULL,
    data JSON NOT NULL,
    computed_at TIMESTAMP NOT NULL
)
"""
