"""
Database location handling and engine creation using SQLAlchemy.

This module turns a user-supplied location (a SQLAlchemy URL or a bare SQLite
file path) plus optional credentials into an ``Engine``. Connection ownership
lives in the gateway; nothing here keeps global state.
"""

import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.pool import StaticPool


def _ensure_parent_dir(db_path: str) -> None:
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

def get_database_url(location: str) -> URL:
    """
    Resolve a location string into a SQLAlchemy URL.
    
    Args:
        location: Either a full URL (``sqlite:///movies.db``,
            ``mysql+pymysql://host/dms_movies``) or a path to a SQLite file
        
    Returns:
        SQLAlchemy URL object
        
    Raises:
        sqlalchemy.exc.ArgumentError: If the URL cannot be parsed
    """
    if "://" not in location:
        # Bare path: SQLite file, converted to absolute path
        _ensure_parent_dir(location)
        return make_url(f"sqlite:///{os.path.abspath(location)}")
    
    url = make_url(location)
    if is_sqlite(url) and url.database and url.database != ":memory:":
        _ensure_parent_dir(url.database)
    return url

def is_sqlite(url: URL) -> bool:
    """True if the URL points at a SQLite database."""
    return url.get_backend_name() == "sqlite"

def apply_credentials(
    url: URL,
    username: Optional[str] = None,
    password: Optional[str] = None
) -> URL:
    """
    Merge credentials into a URL.
    
    SQLite has no notion of users, so credentials are ignored for it. Values
    already present in the URL are only overridden when a username is given.
    """
    if is_sqlite(url) or not username:
        return url
    return url.set(username=username, password=password or None)

def describe_url(url: URL) -> str:
    """Render a URL for logs with the password masked."""
    return url.render_as_string(hide_password=True)

def create_store_engine(url: URL, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.
    
    Args:
        url: Resolved database URL
        echo: If True, log all SQL statements (useful for debugging)
        
    Returns:
        SQLAlchemy Engine
        
    Raises:
        sqlalchemy.exc.NoSuchModuleError: If the dialect is unknown
        ImportError: If the DBAPI driver is not installed
    """
    if is_sqlite(url):
        # Use StaticPool for SQLite so in-memory databases survive
        # between checkouts of the single connection
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
    return create_engine(url, echo=echo, pool_pre_ping=True)
