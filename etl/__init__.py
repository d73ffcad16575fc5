"""ETL package - reference seeding, resets and integrity checks."""

from etl.seed import reset_results, seed_parties
from etl.validation import validate_results

__all__ = [
    "seed_parties",
    "reset_results",
    "validate_results",
]
