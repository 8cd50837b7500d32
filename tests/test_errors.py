"""
Tests for the error taxonomy and display messages.
"""

import pytest

from movie_catalog.errors import (
    CatalogError, ConstraintError, NotFoundError, StoreConnectionError,
    ValidationError, friendly_message, truncate_message, UNKNOWN_ERROR_MESSAGE
)


class TestTaxonomy:
    """Tests for the exception hierarchy."""
    
    @pytest.mark.parametrize('error', [
        ValidationError("bad", field='title'),
        ConstraintError("dup"),
        NotFoundError("X1"),
        StoreConnectionError("down"),
    ])
    def test_all_are_catalog_errors(self, error):
        assert isinstance(error, CatalogError)
    
    def test_builtin_bases(self):
        """Test that errors also match the closest builtin exception."""
        assert isinstance(ValidationError("bad"), ValueError)
        assert isinstance(NotFoundError("X1"), LookupError)
        assert isinstance(StoreConnectionError("down"), ConnectionError)
    
    def test_not_found_names_id(self):
        error = NotFoundError("X1")
        
        assert error.movie_id == "X1"
        assert str(error) == "Movie ID not found: X1"
    
    def test_connection_error_message(self):
        assert str(StoreConnectionError("down")) == "down"


class TestMessages:
    """Tests for message truncation."""
    
    def test_short_message_unchanged(self):
        assert truncate_message("short") == "short"
    
    def test_long_message_truncated(self):
        message = "x" * 500
        
        result = truncate_message(message)
        
        assert result == "x" * 300 + "..."
    
    @pytest.mark.parametrize('message', [None, '', '   '])
    def test_blank_message(self, message):
        assert truncate_message(message) == UNKNOWN_ERROR_MESSAGE
    
    def test_display_message(self):
        error = ConstraintError("y" * 400)
        
        assert len(error.display_message) == 303
    
    def test_friendly_message_any_exception(self):
        assert friendly_message(RuntimeError("boom")) == "boom"
        assert friendly_message(RuntimeError()) == UNKNOWN_ERROR_MESSAGE
