"""
SQLAlchemy ORM model for the movie catalog database.

This module defines the ``movies`` table. The check constraints mirror the
range rules enforced by the service layer, so rows written around the service
are still rejected by the store.
"""

from sqlalchemy import CheckConstraint, Float, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table.
    
    Attributes:
        movie_id: Primary key, a short code such as "INT2010"
        title: Movie title
        director: Director name(s)
        release_year: Year of release (1888..2100)
        duration_minutes: Duration in minutes (1..999)
        genre: Genre (e.g. Action, Drama)
        rating: Rating between 0.0 and 10.0
    """
    __tablename__ = 'movies'
    
    movie_id: Mapped[str] = mapped_column(String(10), primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    director: Mapped[str] = mapped_column(String(120), nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[str] = mapped_column(String(80), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    
    __table_args__ = (
        CheckConstraint(
            "release_year BETWEEN 1888 AND 2100", name='chk_release_year'
        ),
        CheckConstraint(
            "duration_minutes BETWEEN 1 AND 999", name='chk_duration'
        ),
        CheckConstraint("rating BETWEEN 0.0 AND 10.0", name='chk_rating'),
        Index('idx_movies_title', 'title'),
    )
    
    def __repr__(self) -> str:
        return f"<Movie(movie_id='{self.movie_id}', title='{self.title}', year={self.release_year})>"
