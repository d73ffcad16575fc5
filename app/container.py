"""Dependency Injection container - initialized at app startup."""

from app.repositories.common import CacheRepository
from app.repositories.db import close_db
from app.repositories.reference import PartyRepository
from app.repositories.results import ResultRepository
from app.services.election import ElectionService
from app.services.results import ElectionConfig


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, read_only: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories share the thread-local connection, so one mode for all
        self._result_repo = ResultRepository(read_only=read_only)
        self._party_repo = PartyRepository(read_only=read_only)
        self._cache_repo = CacheRepository(read_only=read_only)

        self.election = ElectionService(
            result_repo=self._result_repo,
            party_repo=self._party_repo,
            cache_repo=self._cache_repo,
            config=ElectionConfig.from_settings(),
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop singletons and close the connection so the next init() reopens it."""
        close_db()
        self._initialized = False


# Global container instance
container = Container()
