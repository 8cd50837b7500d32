"""
Error taxonomy for the movie catalog.

Every failure surfaced to callers is one of the four ``CatalogError``
subclasses below. Each carries a human-readable message that can be shortened
for display with ``display_message`` / ``friendly_message``.
"""

from typing import Optional


# Longest message shown to a user before truncation
MAX_MESSAGE_LENGTH = 300

UNKNOWN_ERROR_MESSAGE = "Unknown database error."


def truncate_message(message: Optional[str], limit: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Shorten a message for display.
    
    Args:
        message: Raw message text (may be None or blank)
        limit: Maximum number of characters kept before the ellipsis
        
    Returns:
        The message, cut to ``limit`` characters plus "..." when longer,
        or a generic message when blank
    """
    if message is None or not message.strip():
        return UNKNOWN_ERROR_MESSAGE
    if len(message) > limit:
        return message[:limit] + "..."
    return message


def friendly_message(exc: BaseException, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Return a display-ready message for any exception."""
    return truncate_message(str(exc), limit)


class CatalogError(Exception):
    """Base class for all catalog errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    @property
    def display_message(self) -> str:
        """Message shortened for dialogs and status bars."""
        return truncate_message(self.message)


class ValidationError(CatalogError, ValueError):
    """
    Bad input supplied by the caller.
    
    Raised before the store is contacted.
    
    Attributes:
        field: Name of the first violated field, if the error concerns one
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConstraintError(CatalogError):
    """The store rejected a write because of a uniqueness or range rule."""


class NotFoundError(CatalogError, LookupError):
    """An update targeted a movie id that does not exist."""

    def __init__(self, movie_id: str):
        super().__init__(f"Movie ID not found: {movie_id}")
        self.movie_id = movie_id


class StoreConnectionError(CatalogError, ConnectionError):
    """No open connection, connecting failed, or the store could not be reached."""
