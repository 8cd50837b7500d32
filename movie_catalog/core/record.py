"""
In-memory movie record and lookup result types.

``MovieRecord`` mirrors one row of the ``movies`` table. Construction only
rejects a blank id; range checks are left to ``validate_movie`` so that forms
can hold partially filled records.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from movie_catalog.errors import ValidationError


class MovieRecord(BaseModel):
    """
    A single movie.
    
    Attributes:
        movie_id: Primary key (e.g. "INT2010"), never blank
        title: Movie title
        director: Director name(s)
        release_year: Year of release
        duration_minutes: Running time in minutes
        genre: Genre label
        rating: Score between 0.0 and 10.0
    
    String fields are trimmed on construction and on assignment. Two records
    are equal when their ``movie_id`` values are equal.
    """

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    movie_id: str
    title: str = ""
    director: str = ""
    release_year: int
    duration_minutes: int
    genre: str = ""
    rating: float

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise _as_domain_error(exc) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as exc:
            raise _as_domain_error(exc) from exc

    @field_validator('title', 'director', 'genre', mode='before')
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator('release_year', 'duration_minutes', 'rating', mode='before')
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    @field_validator('movie_id')
    @classmethod
    def _require_movie_id(cls, value: str) -> str:
        if not value:
            raise ValueError("movie_id cannot be blank")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MovieRecord):
            return NotImplemented
        return self.movie_id == other.movie_id

    def __hash__(self) -> int:
        return hash(self.movie_id)

    def __repr__(self) -> str:
        return (
            f"MovieRecord(movie_id='{self.movie_id}', title='{self.title}', "
            f"director='{self.director}', release_year={self.release_year}, "
            f"duration_minutes={self.duration_minutes}, genre='{self.genre}', "
            f"rating={self.rating})"
        )

    @classmethod
    def from_row(cls, row: Any) -> "MovieRecord":
        """Build a detached record from an ORM row or any attribute holder."""
        try:
            return cls.model_validate(row)
        except PydanticValidationError as exc:
            raise _as_domain_error(exc) from exc

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False) -> "MovieRecord":
        """Copy of this record; ``update`` values go through field validation."""
        copy = super().model_copy(deep=deep)
        for name, value in (update or {}).items():
            setattr(copy, name, value)
        return copy

    def to_row(self) -> Dict[str, Any]:
        """Column values keyed by column name, ready for an insert."""
        return self.model_dump()

    def same_values(self, other: "MovieRecord") -> bool:
        """True when every field, not just the id, matches ``other``."""
        return self.model_dump() == other.model_dump()


def _as_domain_error(exc: PydanticValidationError) -> ValidationError:
    """Convert the first pydantic error into a catalog ``ValidationError``."""
    first = exc.errors()[0]
    loc = first.get('loc') or ()
    field: Optional[str] = str(loc[0]) if loc else None
    message = first.get('msg', str(exc))
    # pydantic prefixes errors raised from validators with "Value error, "
    message = message.removeprefix("Value error, ")
    if field and field not in message:
        message = f"{field}: {message}"
    return ValidationError(message, field=field)


@dataclass(frozen=True)
class Found:
    """Lookup result holding the matching record."""

    record: MovieRecord

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """Lookup result for an id with no matching row."""

    movie_id: str

    def __bool__(self) -> bool:
        return False


MovieLookup = Union[Found, NotFound]
