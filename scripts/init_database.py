#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

This script performs database setup:
1. Connects using DATABASE_URL / DB_USER / DB_PASS or command-line overrides
2. Creates the movies table (optionally dropping it first)
3. Seeds the twenty sample movies into an empty table
4. Verifies the schema and prints a short summary

Usage:
    # Create schema and seed sample data
    python scripts/init_database.py --seed

    # Drop and recreate, then seed
    python scripts/init_database.py --reset --seed

    # Use a MySQL database
    python scripts/init_database.py --location mysql+pymysql://localhost/dms_movies --user root
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.config import ConnectionSettings
from movie_catalog.core.service import MovieService
from movie_catalog.database import init_database, verify_schema
from movie_catalog.errors import CatalogError, friendly_message
from movie_catalog.utils import configure_catalog_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the movie catalog database")
    parser.add_argument('--location', help="SQLAlchemy URL or SQLite file path")
    parser.add_argument('--user', help="Database user")
    parser.add_argument('--password', help="Database password")
    parser.add_argument('--reset', action='store_true', help="Drop tables before creating them")
    parser.add_argument('--seed', action='store_true', help="Insert sample movies into an empty table")
    parser.add_argument('--debug', action='store_true', help="Enable debug logging")
    parser.add_argument('--log-file', help="Also write logs to this file under logs/")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_catalog_logging(debug=args.debug, log_file=args.log_file)
    
    settings = ConnectionSettings.from_env().with_overrides(
        location=args.location,
        username=args.user,
        password=args.password,
    )
    
    print_section("Initializing movie catalog")
    try:
        gateway = init_database(settings, reset=args.reset, seed=args.seed)
    except CatalogError as e:
        print(f"\n❌ Database initialization failed: {friendly_message(e)}")
        return 1
    
    service = MovieService(gateway)
    try:
        if not verify_schema(gateway):
            print("\n❌ Schema verification failed!")
            return 1
        
        movies = service.read_all()
        print_section("Summary")
        print(f"  Movies:           {len(movies):,}")
        print(f"  Average duration: {service.average_duration():.1f} min")
        print("\n✅ Database initialization successful!")
        return 0
    except CatalogError as e:
        print(f"\n❌ {friendly_message(e)}")
        return 1
    finally:
        service.close()


if __name__ == "__main__":
    sys.exit(main())
