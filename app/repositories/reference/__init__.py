"""Reference data repositories."""

from app.repositories.reference.party import PartyRepository

__all__ = ["PartyRepository"]
