"""API errors and validation helpers."""

from app.reference import is_known_constituency, normalize_constituency_id


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error", problems: list[str] | None = None):
        self.message = message
        self.problems = problems or []
        super().__init__(self.message)


def validate_constituency_id(constituency_id: str) -> str:
    """Normalize a constituency id and check it exists. Returns the normalized id."""
    if not isinstance(constituency_id, str):
        raise ValidationError(f"Constituency id must be a string, got {type(constituency_id).__name__}")
    cid = normalize_constituency_id(constituency_id)
    if not is_known_constituency(cid):
        raise ValidationError(f"Unknown constituency: {constituency_id!r}")
    return cid
