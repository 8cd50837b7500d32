"""
Business rules applied to a movie before it is written.

Checks run in a fixed order and the first failure wins, so the same invalid
record always produces the same message.
"""

from typing import Optional

from movie_catalog.core.record import MovieRecord
from movie_catalog.errors import ValidationError


MIN_RELEASE_YEAR = 1888
MAX_RELEASE_YEAR = 2100
MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 999
MIN_RATING = 0.0
MAX_RATING = 10.0


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not value.strip()


def validate_movie(movie: Optional[MovieRecord]) -> None:
    """
    Validate a movie record before persistence.
    
    Order: id, title, director, genre, release year, duration, rating.
    
    Args:
        movie: Record to check
        
    Raises:
        ValidationError: Naming the first violated field
    """
    if movie is None:
        raise ValidationError("Movie cannot be null")
    if is_blank(movie.movie_id):
        raise ValidationError("Movie ID cannot be empty", field='movie_id')
    if is_blank(movie.title):
        raise ValidationError("Title cannot be empty", field='title')
    if is_blank(movie.director):
        raise ValidationError("Director cannot be empty", field='director')
    if is_blank(movie.genre):
        raise ValidationError("Genre cannot be empty", field='genre')
    if not (MIN_RELEASE_YEAR <= movie.release_year <= MAX_RELEASE_YEAR):
        raise ValidationError(
            f"Release year must be between {MIN_RELEASE_YEAR} and {MAX_RELEASE_YEAR}",
            field='release_year'
        )
    if not (MIN_DURATION_MINUTES <= movie.duration_minutes <= MAX_DURATION_MINUTES):
        raise ValidationError(
            f"Duration must be {MIN_DURATION_MINUTES}..{MAX_DURATION_MINUTES}",
            field='duration_minutes'
        )
    if not (MIN_RATING <= movie.rating <= MAX_RATING):
        raise ValidationError(
            f"Rating must be {MIN_RATING}..{MAX_RATING}",
            field='rating'
        )
