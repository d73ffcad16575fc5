"""Results repositories."""

from app.repositories.results.result import ResultRepository

__all__ = ["ResultRepository"]
