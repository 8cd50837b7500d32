"""
Persistence capability required by the service layer.

The service depends only on this interface. Which backend implements it is
decided once, by whoever constructs the service.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.core.record import MovieLookup, MovieRecord


class MovieGateway(ABC):
    """
    CRUD, search and connection lifecycle over one store connection.
    
    Every operation except ``connect``, ``is_connected`` and ``close`` raises
    ``StoreConnectionError`` when no connection is open.
    """

    @abstractmethod
    def connect(
        self,
        location: str,
        username: Optional[str] = None,
        password: Optional[str] = None
    ) -> None:
        """Open a connection, replacing any previous one."""

    @abstractmethod
    def is_connected(self) -> bool:
        """True if a connection is open. Never raises."""

    @abstractmethod
    def close(self) -> None:
        """Release the connection. Safe to call more than once."""

    @abstractmethod
    def find_all(self) -> List[MovieRecord]:
        """All movies ordered by title."""

    @abstractmethod
    def find_by_id(self, movie_id: str) -> MovieLookup:
        """Exact lookup on the primary key."""

    @abstractmethod
    def insert(self, record: MovieRecord) -> MovieRecord:
        """Write a new row and return the record unchanged."""

    @abstractmethod
    def update(self, record: MovieRecord) -> bool:
        """Overwrite every non-key column. False if no row matched."""

    @abstractmethod
    def delete(self, movie_id: str) -> bool:
        """Remove one row. False if no row matched."""

    @abstractmethod
    def search_by_title(self, fragment: str) -> List[MovieRecord]:
        """Case-insensitive substring search on title, ordered by title."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored movies."""
