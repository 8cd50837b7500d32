"""
Core domain package.

Contains the movie record, the validation rule applied before every write,
and the service layer that orchestrates validation and persistence.
"""

from movie_catalog.core.record import MovieRecord, Found, NotFound, MovieLookup
from movie_catalog.core.validation import validate_movie, is_blank
from movie_catalog.core.gateway import MovieGateway
from movie_catalog.core.service import MovieService

__all__ = [
    'MovieRecord',
    'Found',
    'NotFound',
    'MovieLookup',
    'validate_movie',
    'is_blank',
    'MovieGateway',
    'MovieService',
]
