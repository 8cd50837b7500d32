"""
Database module for the movie catalog.

This module provides the ORM model, engine creation, the SQLAlchemy gateway,
and schema initialization helpers.
"""

from movie_catalog.database.models import Base, Movie
from movie_catalog.database.connection import (
    get_database_url, create_store_engine
)
from movie_catalog.database.sql_gateway import SqlAlchemyMovieGateway
from movie_catalog.database.init_db import (
    init_database, verify_schema, seed_sample_movies, seed_if_empty
)

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'get_database_url',
    'create_store_engine',
    # Gateway
    'SqlAlchemyMovieGateway',
    # Initialization
    'init_database',
    'verify_schema',
    'seed_sample_movies',
    'seed_if_empty',
]
