"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("ELECTION_DB_PATH", "election.duckdb")

# Logging
LOG_DIR = Path(os.getenv("ELECTION_LOG_DIR", "logs"))

# Election
TOTAL_SEATS = int(os.getenv("ELECTION_TOTAL_SEATS", "300"))
REQUIRED_MAJORITY = int(os.getenv("ELECTION_REQUIRED_MAJORITY", "151"))
TOTAL_REGISTERED_VOTERS = int(os.getenv("ELECTION_REGISTERED_VOTERS", "127711793"))
LOG_LEVEL = os.getenv("ELECTION_LOG_LEVEL", "INFO")
LOG_RETENTION = "14 days"
