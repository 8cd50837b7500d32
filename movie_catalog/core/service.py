"""
Service layer for the movie catalog.

``MovieService`` is the one object the presentation layer holds. It checks
every input before a write reaches the gateway and adds ``NotFoundError`` for
updates that match nothing. All other gateway errors pass through unchanged.
"""

import logging
from typing import List, Optional

from movie_catalog.core.gateway import MovieGateway
from movie_catalog.core.record import MovieLookup, MovieRecord
from movie_catalog.core.validation import is_blank, validate_movie
from movie_catalog.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class MovieService:
    """
    Validation and orchestration over a single gateway.

    Args:
        gateway: Persistence backend, chosen by the caller
    """

    def __init__(self, gateway: MovieGateway):
        if gateway is None:
            raise ValueError("gateway cannot be None")
        self.gateway = gateway

    # ---------- connection ----------

    def connect(
        self,
        location: str,
        username: Optional[str] = None,
        password: Optional[str] = None
    ) -> None:
        """Connect the underlying gateway."""
        self.gateway.connect(location, username, password)

    def is_connected(self) -> bool:
        return self.gateway.is_connected()

    def close(self) -> None:
        self.gateway.close()

    # ---------- CRUD ----------

    def create(self, movie: MovieRecord) -> None:
        """
        Validate and insert a new movie.

        Raises:
            ValidationError: If a field breaks a business rule
            ConstraintError: If the id already exists
            StoreConnectionError: If not connected or the store fails
        """
        validate_movie(movie)
        self.gateway.insert(movie)
        logger.info("Created movie %s", movie.movie_id)

    def read_all(self) -> List[MovieRecord]:
        return self.gateway.find_all()

    def read_by_id(self, movie_id: str) -> MovieLookup:
        """Look up one movie; the id is trimmed first."""
        return self.gateway.find_by_id(_require_id(movie_id))

    def update(self, movie: MovieRecord) -> None:
        """
        Validate and overwrite an existing movie.

        The id selects the row and is never changed.

        Raises:
            ValidationError: If a field breaks a business rule
            NotFoundError: If no movie has this id
        """
        validate_movie(movie)
        if not self.gateway.update(movie):
            raise NotFoundError(movie.movie_id)
        logger.info("Updated movie %s", movie.movie_id)

    def delete_by_id(self, movie_id: str) -> bool:
        """Delete one movie. Returns False if the id did not exist."""
        movie_id = _require_id(movie_id)
        deleted = self.gateway.delete(movie_id)
        if deleted:
            logger.info("Deleted movie %s", movie_id)
        return deleted

    def search_by_title(self, fragment: str) -> List[MovieRecord]:
        if is_blank(fragment):
            raise ValidationError("Title fragment cannot be empty", field='title')
        return self.gateway.search_by_title(fragment)

    # ---------- statistics ----------

    def average_duration(self) -> float:
        """
        Mean duration in minutes over all movies.

        Returns:
            0.0 when the catalog is empty
        """
        movies = self.gateway.find_all()
        if not movies:
            return 0.0
        total = sum(float(m.duration_minutes) for m in movies)
        return total / len(movies)


def _require_id(movie_id: Optional[str]) -> str:
    if is_blank(movie_id):
        raise ValidationError("id cannot be empty", field='movie_id')
    return movie_id.strip()
