"""Services package - service class exports."""

from app.services.election import ElectionService
from app.services.results import ElectionConfig, aggregate, normalize_result, validate_tally

__all__ = [
    "ElectionService",
    "ElectionConfig",
    "aggregate",
    "normalize_result",
    "validate_tally",
]
