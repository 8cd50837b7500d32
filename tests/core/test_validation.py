"""
Unit tests for the movie validation rule.
"""

import pytest

from movie_catalog.core.record import MovieRecord
from movie_catalog.core.validation import validate_movie, is_blank
from movie_catalog.errors import ValidationError


def make_record(**overrides):
    data = dict(
        movie_id='X1',
        title='T',
        director='D',
        release_year=2000,
        duration_minutes=90,
        genre='G',
        rating=7.5,
    )
    data.update(overrides)
    return MovieRecord(**data)


class TestIsBlank:
    """Tests for the blank check."""
    
    @pytest.mark.parametrize('value', [None, '', '   ', '\t\n'])
    def test_blank(self, value):
        assert is_blank(value)
    
    def test_not_blank(self):
        assert not is_blank(' x ')


class TestValidateMovie:
    """Tests for validate_movie."""
    
    def test_valid_record_passes(self):
        """Test that a fully valid record raises nothing."""
        validate_movie(make_record())
    
    def test_none_rejected(self):
        """Test that a missing record is rejected."""
        with pytest.raises(ValidationError):
            validate_movie(None)
    
    @pytest.mark.parametrize('field', ['title', 'director', 'genre'])
    def test_blank_text_field(self, field):
        """Test that blank title, director and genre are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_movie(make_record(**{field: '  '}))
        
        assert exc_info.value.field == field
    
    @pytest.mark.parametrize('field, value', [
        ('release_year', 1887),
        ('release_year', 2101),
        ('duration_minutes', 0),
        ('duration_minutes', 1000),
        ('rating', -0.1),
        ('rating', 10.1),
        ('rating', float('nan')),
    ])
    def test_out_of_range(self, field, value):
        """Test that numeric fields outside their range are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_movie(make_record(**{field: value}))
        
        assert exc_info.value.field == field
    
    @pytest.mark.parametrize('overrides', [
        {'release_year': 1888},
        {'release_year': 2100},
        {'duration_minutes': 1},
        {'duration_minutes': 999},
        {'rating': 0.0},
        {'rating': 10.0},
    ])
    def test_bounds_inclusive(self, overrides):
        """Test that range bounds are accepted."""
        validate_movie(make_record(**overrides))
    
    def test_first_failure_wins(self):
        """Test the fixed check order: title before director before year."""
        record = make_record(title='', director='', release_year=1)
        
        with pytest.raises(ValidationError) as exc_info:
            validate_movie(record)
        
        assert exc_info.value.field == 'title'
        assert 'Title' in str(exc_info.value)
    
    def test_genre_checked_before_numbers(self):
        """Test that text fields are checked before numeric ranges."""
        record = make_record(genre='', rating=99.0)
        
        with pytest.raises(ValidationError) as exc_info:
            validate_movie(record)
        
        assert exc_info.value.field == 'genre'
    
    def test_message_names_field(self):
        """Test that range messages name the violated field."""
        with pytest.raises(ValidationError, match='Duration'):
            validate_movie(make_record(duration_minutes=0))
