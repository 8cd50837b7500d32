"""
Database initialization and sample data.

This module provides functions to create the schema, verify it, and populate
an empty catalog with a small set of well-known movies.
"""

import logging
from typing import Optional

from movie_catalog.config import ConnectionSettings
from movie_catalog.core.record import MovieRecord
from movie_catalog.database.sql_gateway import SqlAlchemyMovieGateway

logger = logging.getLogger(__name__)


# (movie_id, title, director, release_year, duration_minutes, genre, rating)
SAMPLE_MOVIES = [
    ('AVA2015', 'Avatar', 'James Cameron', 2009, 162, 'Science Fiction', 8.0),
    ('INT2010', 'Inception', 'Christopher Nolan', 2010, 148, 'Science Fiction', 9.0),
    ('GOD1972', 'The Godfather', 'Francis Ford Coppola', 1972, 175, 'Crime', 9.2),
    ('DKN2008', 'The Dark Knight', 'Christopher Nolan', 2008, 152, 'Action', 9.0),
    ('PUL1994', 'Pulp Fiction', 'Quentin Tarantino', 1994, 154, 'Crime', 8.9),
    ('FOR1994', 'Forrest Gump', 'Robert Zemeckis', 1994, 142, 'Drama', 8.8),
    ('MAT1999', 'The Matrix', 'Lana Wachowski, Lilly Wachowski', 1999, 136, 'Science Fiction', 8.7),
    ('LOT2001', 'The Fellowship of the Ring', 'Peter Jackson', 2001, 178, 'Fantasy', 8.8),
    ('LOT2002', 'The Two Towers', 'Peter Jackson', 2002, 179, 'Fantasy', 8.7),
    ('LOT2003', 'The Return of the King', 'Peter Jackson', 2003, 201, 'Fantasy', 9.0),
    ('STA1977', 'Star Wars: A New Hope', 'George Lucas', 1977, 121, 'Science Fiction', 8.6),
    ('GUA2014', 'Guardians of the Galaxy', 'James Gunn', 2014, 121, 'Action', 8.0),
    ('TIT1997', 'Titanic', 'James Cameron', 1997, 195, 'Romance', 7.9),
    ('GLA2000', 'Gladiator', 'Ridley Scott', 2000, 155, 'Action', 8.5),
    ('AVA2022', 'Avatar: The Way of Water', 'James Cameron', 2022, 192, 'Science Fiction', 7.6),
    ('JUR1993', 'Jurassic Park', 'Steven Spielberg', 1993, 127, 'Adventure', 8.2),
    ('SCH1993', "Schindler's List", 'Steven Spielberg', 1993, 195, 'Drama', 9.0),
    ('FUR2015', 'Mad Max: Fury Road', 'George Miller', 2015, 120, 'Action', 8.1),
    ('WHI2014', 'Whiplash', 'Damien Chazelle', 2014, 106, 'Drama', 8.5),
    ('PAR2019', 'Parasite', 'Bong Joon-ho', 2019, 132, 'Thriller', 8.6),
]

_COLUMNS = (
    'movie_id', 'title', 'director', 'release_year', 'duration_minutes', 'genre', 'rating'
)


def sample_records():
    """Sample movies as MovieRecord objects."""
    return [MovieRecord(**dict(zip(_COLUMNS, row))) for row in SAMPLE_MOVIES]


def seed_sample_movies(gateway: SqlAlchemyMovieGateway) -> int:
    """
    Insert the sample movies, skipping ids that already exist.
    
    Args:
        gateway: Connected gateway
        
    Returns:
        Number of movies inserted
    """
    inserted = 0
    for record in sample_records():
        if gateway.find_by_id(record.movie_id):
            continue
        gateway.insert(record)
        inserted += 1
    logger.info("Seeded %d sample movies", inserted)
    return inserted


def seed_if_empty(gateway: SqlAlchemyMovieGateway) -> int:
    """Seed the sample movies only when the table has no rows."""
    if gateway.count() > 0:
        return 0
    return seed_sample_movies(gateway)


def init_database(
    settings: Optional[ConnectionSettings] = None,
    reset: bool = False,
    seed: bool = False
) -> SqlAlchemyMovieGateway:
    """
    Connect, create the schema, and optionally seed it.
    
    Args:
        settings: Where to connect (defaults to the environment)
        reset: If True, drop existing tables before creating new ones
        seed: If True, insert sample movies when the table is empty
        
    Returns:
        Connected SqlAlchemyMovieGateway
    """
    settings = settings or ConnectionSettings.from_env()
    gateway = SqlAlchemyMovieGateway()
    gateway.connect(settings.location, settings.username, settings.password_value())
    
    if reset:
        logger.info("Resetting database (dropping all tables)...")
        gateway.drop_tables()
    gateway.create_tables()
    
    if seed:
        seed_if_empty(gateway)
    
    return gateway


def verify_schema(gateway: SqlAlchemyMovieGateway) -> bool:
    """
    Verify that the movies table exists.
    
    Args:
        gateway: Connected gateway
        
    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(gateway.table_names())
    expected_tables = {'movies'}
    missing_tables = expected_tables - existing_tables
    
    if missing_tables:
        logger.warning("Missing tables: %s", missing_tables)
        return False
    
    logger.info("All tables exist: %s", existing_tables)
    return True
