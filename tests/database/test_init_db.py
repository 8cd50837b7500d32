"""
Tests for schema initialization and sample data seeding.
"""

import pytest

from movie_catalog.config import ConnectionSettings
from movie_catalog.database.init_db import (
    SAMPLE_MOVIES, init_database, sample_records, seed_if_empty,
    seed_sample_movies, verify_schema
)
from movie_catalog.core.validation import validate_movie


@pytest.fixture
def settings(tmp_path):
    return ConnectionSettings(location=str(tmp_path / 'movies.db'))


class TestSampleData:
    """Tests for the bundled sample movies."""
    
    def test_sample_movies_are_valid(self):
        """Test that every sample passes business validation."""
        records = sample_records()
        
        assert len(records) == len(SAMPLE_MOVIES) == 20
        for record in records:
            validate_movie(record)
    
    def test_sample_ids_unique(self):
        """Test that sample ids do not collide."""
        ids = [row[0] for row in SAMPLE_MOVIES]
        assert len(ids) == len(set(ids))


class TestInitDatabase:
    """Tests for init_database and verify_schema."""
    
    def test_creates_schema(self, settings):
        """Test that init creates the movies table."""
        gateway = init_database(settings)
        try:
            assert verify_schema(gateway)
            assert gateway.count() == 0
        finally:
            gateway.close()
    
    def test_seed(self, settings):
        """Test that seeding fills an empty table."""
        gateway = init_database(settings, seed=True)
        try:
            assert gateway.count() == 20
            assert gateway.find_by_id('MAT1999').record.title == 'The Matrix'
        finally:
            gateway.close()
    
    def test_reset_drops_rows(self, settings):
        """Test that reset recreates an empty table."""
        init_database(settings, seed=True).close()
        
        gateway = init_database(settings, reset=True)
        try:
            assert gateway.count() == 0
        finally:
            gateway.close()
    
    def test_verify_schema_missing(self, settings):
        """Test that verification fails without the movies table."""
        gateway = init_database(settings)
        try:
            gateway.drop_tables()
            assert not verify_schema(gateway)
        finally:
            gateway.close()


class TestSeeding:
    """Tests for seed_sample_movies and seed_if_empty."""
    
    def test_seed_skips_existing(self, settings):
        """Test that existing ids are not inserted twice."""
        gateway = init_database(settings)
        try:
            gateway.insert(sample_records()[0])
            
            assert seed_sample_movies(gateway) == 19
            assert gateway.count() == 20
        finally:
            gateway.close()
    
    def test_seed_if_empty_noop(self, settings):
        """Test that a populated table is left alone."""
        gateway = init_database(settings)
        try:
            gateway.insert(sample_records()[0])
            
            assert seed_if_empty(gateway) == 0
            assert gateway.count() == 1
        finally:
            gateway.close()
