"""
Tests for connection settings.
"""

import pytest

from movie_catalog.config import (
    DEFAULT_DATABASE_URL, ConnectionSettings, get_log_level
)


class TestConnectionSettings:
    """Tests for ConnectionSettings."""
    
    def test_defaults(self):
        """Test the default SQLite location."""
        settings = ConnectionSettings()
        
        assert settings.location == DEFAULT_DATABASE_URL
        assert settings.username is None
        assert settings.password_value() is None
    
    def test_from_env(self):
        """Test reading the three recognised variables."""
        settings = ConnectionSettings.from_env({
            'DATABASE_URL': 'mysql+pymysql://localhost/dms_movies',
            'DB_USER': 'root',
            'DB_PASS': 'secret',
        })
        
        assert settings.location == 'mysql+pymysql://localhost/dms_movies'
        assert settings.username == 'root'
        assert settings.password_value() == 'secret'
    
    def test_from_env_blank_values(self):
        """Test that blank variables fall back to defaults."""
        settings = ConnectionSettings.from_env({'DATABASE_URL': '  ', 'DB_USER': ''})
        
        assert settings.location == DEFAULT_DATABASE_URL
        assert settings.username is None
    
    def test_password_not_in_repr(self):
        """Test that the password is masked when printed."""
        settings = ConnectionSettings(password='secret')
        
        assert 'secret' not in repr(settings)
    
    def test_with_overrides(self):
        """Test that non-empty overrides replace fields."""
        base = ConnectionSettings(location='sqlite://', username='a', password='x')
        
        updated = base.with_overrides(location='other.db', username=None, password='y')
        
        assert updated.location == 'other.db'
        assert updated.username == 'a'
        assert updated.password_value() == 'y'
        assert base.password_value() == 'x'
    
    def test_settings_are_frozen(self):
        """Test that settings cannot be changed in place."""
        settings = ConnectionSettings()
        
        with pytest.raises(Exception):
            settings.location = 'elsewhere'


def test_get_log_level(monkeypatch):
    """Test reading LOG_LEVEL."""
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    assert get_log_level() == 'DEBUG'
    
    monkeypatch.delenv('LOG_LEVEL')
    assert get_log_level() == 'INFO'
