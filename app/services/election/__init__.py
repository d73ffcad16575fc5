"""Election service."""

from app.services.election.service import ElectionService

__all__ = ["ElectionService"]
