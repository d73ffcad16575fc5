"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any


def _json_ready(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: v.isoformat() if isinstance(v, datetime) else v for k, v in items}


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a JSON-ready dictionary (datetimes as ISO strings)."""
        return asdict(self, dict_factory=_json_ready)
