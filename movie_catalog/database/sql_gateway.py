"""
SQLAlchemy implementation of the movie gateway.

The gateway owns exactly one ``Connection``. Each operation opens a short
``Session`` on that connection which commits on success, rolls back on
failure and is always closed, so no cursor outlives the call that opened it.
Driver errors are translated into ``ConstraintError`` or
``StoreConnectionError``.
"""

import logging
from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy import func, inspect
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import (
    ArgumentError, DataError, DBAPIError, IntegrityError, NoSuchModuleError,
    SQLAlchemyError
)
from sqlalchemy.orm import Session

from movie_catalog.core.gateway import MovieGateway
from movie_catalog.core.record import Found, MovieLookup, MovieRecord, NotFound
from movie_catalog.core.validation import is_blank
from movie_catalog.database.connection import (
    apply_credentials, create_store_engine, describe_url, get_database_url
)
from movie_catalog.database.models import Base, Movie
from movie_catalog.errors import (
    ConstraintError, StoreConnectionError, ValidationError
)

logger = logging.getLogger(__name__)


# Columns written by update; the primary key is never changed
MUTABLE_FIELDS = (
    'title', 'director', 'release_year', 'duration_minutes', 'genre', 'rating'
)

# MySQL reports CHECK violations as a generic error with this code
MYSQL_CHECK_CONSTRAINT_VIOLATED = 3819


def _is_constraint_violation(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, (IntegrityError, DataError)):
        return True
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        args = getattr(exc.orig, 'args', ())
        return bool(args) and args[0] == MYSQL_CHECK_CONSTRAINT_VIOLATED
    return False


def _driver_message(exc: SQLAlchemyError) -> str:
    """The driver's own message, without SQLAlchemy's statement dump."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class SqlAlchemyMovieGateway(MovieGateway):
    """
    Movie gateway backed by any SQLAlchemy-supported database.

    Usage:
        gateway = SqlAlchemyMovieGateway()
        gateway.connect("sqlite:///data/movies.db")
        movies = gateway.find_all()
        gateway.close()
    """

    def __init__(self, echo: bool = False):
        """
        Initialize an unconnected gateway.

        Args:
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None

    # ==================== CONNECTION LIFECYCLE ====================

    def connect(
        self,
        location: str,
        username: Optional[str] = None,
        password: Optional[str] = None
    ) -> None:
        """
        Open a connection to the store.

        Args:
            location: SQLAlchemy URL or path to a SQLite file
            username: Database user (ignored for SQLite)
            password: Database password (ignored for SQLite)

        Raises:
            StoreConnectionError: If the location is empty or malformed, the
                driver is missing, or the store refuses the connection
        """
        if is_blank(location):
            raise StoreConnectionError("Database location cannot be empty")

        try:
            url = apply_credentials(get_database_url(location.strip()), username, password)
        except (ArgumentError, OSError) as exc:
            raise StoreConnectionError(f"Invalid database location '{location}': {exc}") from exc

        try:
            engine = create_store_engine(url, echo=self.echo)
        except (NoSuchModuleError, ImportError) as exc:
            raise StoreConnectionError(
                f"Database driver not available for {url.drivername}: {exc}"
            ) from exc

        try:
            connection = engine.connect()
        except SQLAlchemyError as exc:
            engine.dispose()
            logger.warning("Connection to %s failed: %s", describe_url(url), exc)
            raise StoreConnectionError(
                f"Could not connect to {describe_url(url)}: {_driver_message(exc)}"
            ) from exc

        # Only a successful connect replaces the previous one
        previous_connection, previous_engine = self._connection, self._engine
        self._engine = engine
        self._connection = connection
        self._release(previous_connection, previous_engine)
        logger.info("Connected to %s", describe_url(url))

    def is_connected(self) -> bool:
        """True iff a connection exists and is neither closed nor invalidated."""
        connection = self._connection
        if connection is None:
            return False
        try:
            return not connection.closed and not connection.invalidated
        except Exception:
            logger.debug("Connection state check failed", exc_info=True)
            return False

    def close(self) -> None:
        """Close the connection and dispose the engine; no-op when closed."""
        connection, engine = self._connection, self._engine
        self._connection = None
        self._engine = None
        if self._release(connection, engine):
            logger.info("Database connection closed")

    @staticmethod
    def _release(connection: Optional[Connection], engine: Optional[Engine]) -> bool:
        if connection is None and engine is None:
            return False
        try:
            if connection is not None and not connection.closed:
                connection.close()
        except SQLAlchemyError as exc:
            raise StoreConnectionError(f"Error while closing connection: {_driver_message(exc)}") from exc
        finally:
            if engine is not None:
                engine.dispose()
        return True

    def _require_connection(self) -> Connection:
        if not self.is_connected():
            raise StoreConnectionError("No open database connection. Call connect(...) first.")
        return self._connection

    @contextmanager
    def session_scope(self, action: str) -> Generator[Session, None, None]:
        """
        Context manager for a session on the owned connection.

        Commits on success and rolls back on failure. Driver errors are
        translated into catalog errors.

        Args:
            action: Short description used in error messages

        Yields:
            SQLAlchemy Session object
        """
        session = Session(bind=self._require_connection(), expire_on_commit=False)
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            self._rollback_quietly(session)
            if _is_constraint_violation(exc):
                logger.warning("Constraint violation while trying to %s: %s", action, exc)
                raise ConstraintError(
                    f"Could not {action}: {_driver_message(exc)}"
                ) from exc
            logger.warning("Database error while trying to %s: %s", action, exc)
            raise StoreConnectionError(
                f"Database error while trying to {action}: {_driver_message(exc)}"
            ) from exc
        except Exception:
            self._rollback_quietly(session)
            raise
        finally:
            session.close()

    @staticmethod
    def _rollback_quietly(session: Session) -> None:
        # The original error is the one worth reporting
        try:
            session.rollback()
        except SQLAlchemyError:
            logger.debug("Rollback failed", exc_info=True)

    # ==================== SCHEMA ====================

    def create_tables(self) -> None:
        """Create the movies table if it does not exist."""
        self._run_ddl("create tables", Base.metadata.create_all)

    def drop_tables(self) -> None:
        """
        Drop the movies table.

        WARNING: This will delete all data in the database!
        """
        self._run_ddl("drop tables", Base.metadata.drop_all)

    def table_names(self) -> List[str]:
        """Names of the tables present in the connected database."""
        connection = self._require_connection()
        try:
            with connection.begin():
                return inspect(connection).get_table_names()
        except SQLAlchemyError as exc:
            raise StoreConnectionError(f"Could not inspect schema: {_driver_message(exc)}") from exc

    def _run_ddl(self, action: str, operation) -> None:
        connection = self._require_connection()
        try:
            with connection.begin():
                operation(connection)
        except SQLAlchemyError as exc:
            raise StoreConnectionError(f"Could not {action}: {_driver_message(exc)}") from exc
        logger.info("Schema operation complete: %s", action)

    # ==================== READS ====================

    def find_all(self) -> List[MovieRecord]:
        """
        Get every movie.

        Returns:
            List of MovieRecord objects ordered by title (ties by id)
        """
        with self.session_scope("load movies") as session:
            rows = session.query(Movie).order_by(Movie.title.asc(), Movie.movie_id.asc()).all()
            return [MovieRecord.from_row(row) for row in rows]

    def find_by_id(self, movie_id: str) -> MovieLookup:
        """
        Get a movie by ID.

        Args:
            movie_id: Primary key, matched exactly

        Returns:
            Found with the record, or NotFound

        Raises:
            ValidationError: If movie_id is blank
        """
        if is_blank(movie_id):
            raise ValidationError("Movie ID cannot be empty", field='movie_id')
        with self.session_scope(f"load movie {movie_id}") as session:
            row = session.get(Movie, movie_id)
            if row is None:
                return NotFound(movie_id)
            return Found(MovieRecord.from_row(row))

    def search_by_title(self, fragment: str) -> List[MovieRecord]:
        """
        Search movies whose title contains a fragment, ignoring case.

        ``%`` and ``_`` in the fragment are matched literally.

        Args:
            fragment: Text to look for (trimmed before matching)

        Returns:
            List of MovieRecord objects ordered by title

        Raises:
            ValidationError: If fragment is blank
        """
        if is_blank(fragment):
            raise ValidationError("Title fragment cannot be empty", field='title')
        with self.session_scope("search movies") as session:
            rows = (
                session.query(Movie)
                .filter(Movie.title.icontains(fragment.strip(), autoescape=True))
                .order_by(Movie.title.asc(), Movie.movie_id.asc())
                .all()
            )
            return [MovieRecord.from_row(row) for row in rows]

    def count(self) -> int:
        """Get total count of movies."""
        with self.session_scope("count movies") as session:
            return session.query(func.count(Movie.movie_id)).scalar()

    # ==================== WRITES ====================

    def insert(self, record: MovieRecord) -> MovieRecord:
        """
        Insert a new movie.

        Args:
            record: Movie to store

        Returns:
            The same record

        Raises:
            ConstraintError: If the id exists or a check constraint fails
        """
        if record is None:
            raise ValidationError("Movie cannot be null")
        with self.session_scope(f"insert movie {record.movie_id}") as session:
            session.add(Movie(**record.to_row()))
        logger.debug("Inserted movie %s", record.movie_id)
        return record

    def update(self, record: MovieRecord) -> bool:
        """
        Overwrite every non-key column of an existing movie.

        Args:
            record: Movie carrying the new values; its id selects the row

        Returns:
            True if a row matched, False otherwise

        Raises:
            ConstraintError: If a check constraint fails
        """
        if record is None:
            raise ValidationError("Movie cannot be null")
        with self.session_scope(f"update movie {record.movie_id}") as session:
            row = session.get(Movie, record.movie_id)
            if row is None:
                return False
            for field in MUTABLE_FIELDS:
                setattr(row, field, getattr(record, field))
        logger.debug("Updated movie %s", record.movie_id)
        return True

    def delete(self, movie_id: str) -> bool:
        """
        Delete a movie.

        Args:
            movie_id: Primary key

        Returns:
            True if the movie was deleted, False if not found

        Raises:
            ValidationError: If movie_id is blank
        """
        if is_blank(movie_id):
            raise ValidationError("Movie ID cannot be empty", field='movie_id')
        with self.session_scope(f"delete movie {movie_id}") as session:
            row = session.get(Movie, movie_id)
            if row is None:
                return False
            session.delete(row)
        logger.debug("Deleted movie %s", movie_id)
        return True
