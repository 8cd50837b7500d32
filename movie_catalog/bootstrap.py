"""
Wiring for callers that need a ready-to-use service.

Chooses the gateway once, at construction, and opens the connection before
any other call is made.
"""

import logging
from typing import Optional

from movie_catalog.config import ConnectionSettings
from movie_catalog.core.gateway import MovieGateway
from movie_catalog.core.service import MovieService
from movie_catalog.database.sql_gateway import SqlAlchemyMovieGateway

logger = logging.getLogger(__name__)


def build_service(gateway: Optional[MovieGateway] = None, echo: bool = False) -> MovieService:
    """Create an unconnected service over ``gateway`` (SQLAlchemy by default)."""
    return MovieService(gateway or SqlAlchemyMovieGateway(echo=echo))


def connect_service(
    settings: ConnectionSettings,
    gateway: Optional[MovieGateway] = None,
    echo: bool = False
) -> MovieService:
    """
    Build a service and connect it using explicit settings.

    Args:
        settings: Location and credentials
        gateway: Backend to use instead of the default SQLAlchemy gateway
        echo: If True, log all SQL statements

    Returns:
        Connected MovieService

    Raises:
        StoreConnectionError: If the connection cannot be opened
    """
    service = build_service(gateway, echo=echo)
    logger.debug("Connecting movie service (user=%s)", settings.username)
    service.connect(settings.location, settings.username, settings.password_value())
    return service
